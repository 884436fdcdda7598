# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 PageEval contributors

import io
import logging
from xml.etree import ElementTree

import pytest

from pageeval import (
    DocumentFormat,
    GaleXmlPage,
    HocrPage,
    PageParserError,
    TxtPage,
    classify_and_count,
    parse_page,
)
from pageeval.sources.galexml import left_edge
from pageeval.sources.hocr import parse_title_properties
from pageeval.sources.txt import merge_hyphenated_words, normalize_lines


def _read(path) -> io.StringIO:
    return io.StringIO(path.read_text(encoding="utf-8"))


def test_normalize_lines_drops_blank_lines():
    reader = io.StringIO("  first line  \n\n   \nsecond\n")
    assert normalize_lines(reader) == "first line\nsecond\n"


def test_merge_hyphenated_words_joins_letters_only():
    assert merge_hyphenated_words("some inter-\nnational text\n") == "some international\ntext\n"
    assert merge_hyphenated_words("pages 12-\n13\n") == "pages 12-\n13\n"


def test_merge_hyphenated_words_needs_unicode_letters():
    assert merge_hyphenated_words("x\u00b2-\nfoo\n") == "x\u00b2-\nfoo\n"
    assert merge_hyphenated_words("XII-\n\u216bfoo\n") == "XII-\n\u216bfoo\n"
    assert merge_hyphenated_words("caf\u00e9-\nbar\n") == "caf\u00e9bar\n"


def test_merge_hyphenated_words_continues_after_rejected_break():
    assert merge_hyphenated_words("x\u00b2-\ncd-\nef\n") == "x\u00b2-\ncdef\n"


def test_txt_page_tokens(fixtures_dir):
    page = TxtPage.parse(_read(fixtures_dir / "page.txt"), page_id="page.txt")

    tokens = list(page.produce())

    assert [token.text for token in tokens] == ["The", "international", "market", "."]
    assert not any(token.is_last_on_line for token in tokens)
    assert page.info.page_id == "page.txt"
    assert page.info.format == DocumentFormat.TXT

    stats = classify_and_count(page.produce())
    assert stats.total_tokens == 4
    assert stats.clean_all_alpha_tokens == 3
    assert stats.punctuation_tokens == 1
    assert stats.correctable_score == 1.0
    assert stats.quality_score == 0.75


def test_parse_title_properties():
    assert parse_title_properties("bbox 1 2 3 4; x_wconf 93") == {"bbox": "1 2 3 4", "x_wconf": "93"}
    assert parse_title_properties("") == {}


def test_hocr_page_lines_and_metadata(fixtures_dir):
    page = HocrPage.parse(_read(fixtures_dir / "page.hocr"))

    tokens = list(page.produce())

    assert [(token.text, token.is_last_on_line) for token in tokens] == [
        ("Hello", False),
        ("wor-", True),
        ("ld.", True),
    ]
    assert tokens[0].token_id == "word_1"
    assert tokens[0].properties == {"bbox": "100 100 200 130", "x_wconf": "91"}

    info = page.info
    assert info.page_id == "page_1"
    assert info.format == DocumentFormat.HOCR
    assert info.ocr_engine == "tesseract 3.02.02"
    assert info.ocr_capabilities == ["ocr_page", "ocr_carea", "ocr_par", "ocr_line", "ocrx_word"]


def test_hocr_page_is_restartable(fixtures_dir):
    page = HocrPage.parse(_read(fixtures_dir / "page.hocr"))

    assert list(page.produce()) == list(page.produce())


def test_hocr_page_statistics(fixtures_dir):
    page = HocrPage.parse(_read(fixtures_dir / "page.hocr"))

    stats = classify_and_count(page.produce())

    assert stats.total_tokens == 2
    assert stats.clean_all_alpha_tokens == 2
    assert stats.scores().correctable == 1.0
    assert stats.scores().quality == 1.0


def test_hocr_without_page_fails():
    with pytest.raises(PageParserError):
        HocrPage.parse(io.StringIO("<html><body><p>no page here</p></body></html>"))


def test_hocr_without_page_is_logged():
    records = []
    handler = logging.Handler()
    handler.emit = records.append
    source_logger = logging.getLogger("pageeval.sources.markup")
    source_logger.addHandler(handler)
    try:
        with pytest.raises(PageParserError):
            HocrPage.parse(io.StringIO("<html><body><p>no page here</p></body></html>"))
    finally:
        source_logger.removeHandler(handler)

    assert [record.levelno for record in records] == [logging.ERROR]
    assert "ocr_page" in records[0].getMessage()


def test_hocr_truncated_document_fails():
    markup = (
        '<html><body><div class="ocr_page" id="p1"><span class="ocr_line">'
        '<span class="ocrx_word">Hello</span><span class="ocrx_word">wor'
    )

    with pytest.raises(PageParserError, match="Malformed") as excinfo:
        HocrPage.parse(io.StringIO(markup))

    assert isinstance(excinfo.value.__cause__, ElementTree.ParseError)


def test_left_edge():
    assert left_edge("12,3,40,50") == 12
    assert left_edge("") is None
    assert left_edge(None) is None
    assert left_edge("abc,1,2,3") is None


def test_gale_page_infers_line_ends(fixtures_dir):
    page = GaleXmlPage.parse(_read(fixtures_dir / "page_gale.xml"), page_id="fallback")

    tokens = list(page.produce())

    assert [(token.text, token.is_last_on_line) for token in tokens] == [
        ("The", False),
        ("inter-", True),
        ("national", False),
        ("trade.", True),
        ("Ends", True),
    ]
    assert tokens[0].properties == {"pos": "100,100,200,120"}
    assert page.info.page_id == "00020"
    assert page.info.format == DocumentFormat.GALEXML

    stats = classify_and_count(page.produce())
    assert stats.total_tokens == 4
    assert stats.clean_all_alpha_tokens == 4


def test_gale_without_page_root_fails():
    with pytest.raises(PageParserError):
        GaleXmlPage.parse(io.StringIO("<html><body>nothing</body></html>"))


def test_gale_nested_page_is_not_a_root():
    markup = '<html><body><page><p><wd pos="1,1,2,2">word</wd></p></page></body></html>'

    with pytest.raises(PageParserError, match="root"):
        GaleXmlPage.parse(io.StringIO(markup))


def test_gale_malformed_markup_fails():
    markup = '<page><pageContent><p><wd pos="1,1,2,2">word</wd>'

    with pytest.raises(PageParserError) as excinfo:
        GaleXmlPage.parse(io.StringIO(markup))

    assert isinstance(excinfo.value.__cause__, ElementTree.ParseError)


def test_gale_empty_page_is_valid():
    page = GaleXmlPage.parse(io.StringIO("<page><pageContent></pageContent></page>"), page_id="p1")

    assert list(page.produce()) == []
    assert page.info.page_id == "p1"


@pytest.mark.parametrize(
    "document_format, page_type",
    [
        ("txt", TxtPage),
        ("TXT", TxtPage),
        (DocumentFormat.HOCR, HocrPage),
        ("galexml", GaleXmlPage),
    ],
)
def test_parse_page_dispatches_on_format(fixtures_dir, document_format, page_type):
    files = {TxtPage: "page.txt", HocrPage: "page.hocr", GaleXmlPage: "page_gale.xml"}
    page = parse_page(_read(fixtures_dir / files[page_type]), document_format)

    assert isinstance(page, page_type)


def test_parse_page_rejects_unknown_format():
    with pytest.raises(PageParserError, match="Unsupported format"):
        parse_page(io.StringIO(""), "pdf")

"""Tests for analyzerbot.parsers module."""

from analyzerbot.parsers import (
    extract_message_urls,
    extract_urls,
    parse_hash,
    parse_report_link,
)

REPORT_URL = "https://warcraftlogs.com/reports/AbCdEf1234567890/"


class TestExtractUrls:
    """Tests for extract_urls function."""

    def test_finds_url_inside_text(self):
        text = f"check this out {REPORT_URL}#fight=3&source=7 please"
        assert extract_urls(text) == [f"{REPORT_URL}#fight=3&source=7"]

    def test_finds_multiple_urls_in_order(self):
        text = "a https://one.example/x b http://two.example/y"
        assert extract_urls(text) == ["https://one.example/x", "http://two.example/y"]

    def test_strips_trailing_punctuation(self):
        assert extract_urls("see (https://one.example/x).") == ["https://one.example/x"]

    def test_stops_at_angle_brackets(self):
        assert extract_urls(f"<{REPORT_URL}>") == [REPORT_URL]

    def test_keeps_duplicates(self):
        assert extract_urls(f"{REPORT_URL} {REPORT_URL}") == [REPORT_URL, REPORT_URL]

    def test_ignores_text_without_urls(self):
        assert extract_urls("no links, just warcraftlogs.com talk") == []

    def test_handles_empty_and_none(self):
        assert extract_urls("") == []
        assert extract_urls(None) == []


class TestExtractMessageUrls:
    """Tests for extract_message_urls function."""

    def test_body_urls_come_before_embed_urls(self):
        urls = extract_message_urls(
            "first https://one.example/", ["https://two.example/"]
        )
        assert urls == ["https://one.example/", "https://two.example/"]

    def test_embed_only(self):
        assert extract_message_urls("", [REPORT_URL]) == [REPORT_URL]

    def test_drops_embed_values_that_are_not_urls(self):
        assert extract_message_urls("", ["not a url"]) == []

    def test_no_urls(self):
        assert extract_message_urls("hello", []) == []


class TestParseHash:
    """Tests for parse_hash function."""

    def test_parses_pairs(self):
        assert parse_hash("#fight=3&source=7") == {"fight": "3", "source": "7"}

    def test_leading_hash_is_optional(self):
        assert parse_hash("fight=3") == {"fight": "3"}

    def test_decodes_percent_escapes(self):
        assert parse_hash("#view=a%20b") == {"view": "a b"}

    def test_keeps_blank_values(self):
        assert parse_hash("#start=") == {"start": ""}

    def test_last_value_wins(self):
        assert parse_hash("#fight=1&fight=2") == {"fight": "2"}

    def test_empty(self):
        assert parse_hash("") == {}
        assert parse_hash(None) == {}


class TestParseReportLink:
    """Tests for parse_report_link function."""

    def test_parses_plain_report_link(self):
        link = parse_report_link(REPORT_URL)
        assert link is not None
        assert link.report_code == "AbCdEf1234567890"
        assert link.fight_id is None
        assert link.player_id is None
        assert link.filters == {}

    def test_trailing_slash_is_optional(self):
        link = parse_report_link("https://warcraftlogs.com/reports/AbCdEf1234567890")
        assert link is not None

    def test_accepts_subdomains(self):
        link = parse_report_link("https://www.warcraftlogs.com/reports/AbCdEf1234567890/")
        assert link is not None
        assert link.report_code == "AbCdEf1234567890"

    def test_extracts_navigation_parameters(self):
        link = parse_report_link(f"{REPORT_URL}#fight=3&source=7")
        assert link.fight_id == "3"
        assert link.player_id == "7"
        assert link.has_advanced_filters is False

    def test_separates_advanced_filters(self):
        link = parse_report_link(f"{REPORT_URL}#fight=3&start=100&end=200&type=damage")
        assert link.fight_id == "3"
        assert link.filters == {"start": "100", "end": "200"}
        assert link.has_advanced_filters is True

    def test_ignores_unrecognized_keys(self):
        link = parse_report_link(f"{REPORT_URL}#type=healing&boss=-2")
        assert link.filters == {}
        assert link.has_advanced_filters is False

    def test_blank_filter_values_are_not_advanced(self):
        link = parse_report_link(f"{REPORT_URL}#start=")
        assert link.filters == {"start": ""}
        assert link.has_advanced_filters is False

    def test_rejects_other_hosts(self):
        assert parse_report_link("https://example.com/reports/AbCdEf1234567890/") is None
        assert (
            parse_report_link("https://warcraftlogs.com.evil.example/reports/AbCdEf1234567890/")
            is None
        )

    def test_rejects_other_paths(self):
        assert parse_report_link("https://warcraftlogs.com/reports/short/") is None
        assert parse_report_link("https://warcraftlogs.com/character/eu/x/y") is None
        assert parse_report_link(f"{REPORT_URL}3") is None

    def test_rejects_non_http_schemes(self):
        assert parse_report_link("ftp://warcraftlogs.com/reports/AbCdEf1234567890/") is None

    def test_unparseable_url_is_not_a_match(self):
        assert parse_report_link("https://[warcraftlogs.com/reports/AbCdEf1234567890/") is None

    def test_is_deterministic(self):
        url = f"{REPORT_URL}#fight=3&source=7&pins=2"
        assert parse_report_link(url) == parse_report_link(url)

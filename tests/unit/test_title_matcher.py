import pytest

from services.brand_resolution import (
    check_brand_match,
    find_brand_matches,
    should_ignore_brand,
    tokenize_title,
)


def _matches(title, brand):
    return find_brand_matches(tokenize_title(title), brand)


class TestFindBrandMatches:

    def test_exact_word(self):
        assert _matches("abc Pain Relief", "abc") == [0]

    def test_case_insensitive_word(self):
        assert _matches("XYZ Pain Relief 500mg", "xyz") == [0]

    def test_accent_folded_word(self):
        assert _matches("Sirup nene 100ml", "nenê") == [1]

    def test_accent_folded_brand_in_title(self):
        assert _matches("Nenê sirup", "nene") == [0]

    def test_word_with_attached_punctuation(self):
        assert _matches("Tablets (XYZ), 20 pcs", "xyz") == [1]

    def test_word_with_hyphenated_suffix(self):
        assert _matches("ABC-500 tablets", "abc") == [0]

    def test_brand_inside_longer_word_is_not_matched(self):
        assert _matches("Xyzzy tablets", "xyz") == []

    def test_all_occurrences_in_scan_order(self):
        assert _matches("Pain XYZ relief xyz", "xyz") == [1, 3]

    def test_no_occurrence(self):
        assert _matches("Vitamin C 500mg", "xyz") == []


class TestIgnoredBrands:

    @pytest.mark.parametrize("brand", ["bio", "neb", " BIO ", "Neb"])
    def test_ignored_brand_detected(self, brand):
        assert should_ignore_brand(brand)

    @pytest.mark.parametrize("title", [
        "bio",
        "Bio Aktiv Tablets",
        "Organic BIO tea",
        "Neb inhaler",
        "neb",
    ])
    @pytest.mark.parametrize("brand", ["bio", "neb"])
    def test_ignored_brand_never_matches(self, title, brand):
        assert not check_brand_match(title, brand).is_valid


class TestPositionalPolicy:

    def test_front_only_brand_at_start(self):
        result = check_brand_match("Ultra Pain Relief", "ultra")
        assert result.is_valid
        assert result.match_index == 0

    def test_front_only_brand_later_in_title(self):
        assert not check_brand_match("Pain Ultra Relief", "ultra").is_valid

    @pytest.mark.parametrize("title,expected_index", [
        ("Heel Traumeel tablets", 0),
        ("Traumeel Heel tablets", 1),
    ])
    def test_front_or_second_brand_allowed(self, title, expected_index):
        result = check_brand_match(title, "heel")
        assert result.is_valid
        assert result.match_index == expected_index

    def test_front_or_second_brand_rejected_at_third_word(self):
        assert not check_brand_match("Traumeel tablets Heel", "heel").is_valid

    def test_unrestricted_brand_anywhere(self):
        result = check_brand_match("Pain relief by XYZ", "xyz")
        assert result.is_valid
        assert result.match_index == 3


class TestCaseSensitiveBrand:

    @pytest.mark.parametrize("title", ["Happy Tablets", "HAPPY tablets"])
    def test_capitalized_forms_match(self, title):
        result = check_brand_match(title, "happy")
        assert result.is_valid
        assert result.match_index == 0

    @pytest.mark.parametrize("title", ["happy tablets", "HaPpY tablets", "Unhappy Tablets"])
    def test_other_forms_do_not_match(self, title):
        assert not check_brand_match(title, "happy").is_valid

    def test_literal_form_rule_takes_precedence_over_front_only(self):
        result = check_brand_match("Vitamins Happy Kids", "happy")
        assert result.is_valid
        assert result.match_index == 1


class TestBestOccurrence:

    def test_prefers_occurrence_at_start(self):
        result = check_brand_match("ABC tablets with abc", "abc")
        assert result.match_index == 0

    def test_first_valid_occurrence_otherwise(self):
        result = check_brand_match("Pain XYZ relief xyz", "xyz")
        assert result.match_index == 1

    def test_invalid_occurrences_are_skipped(self):
        result = check_brand_match("Traumeel tablets Heel heel", "heel")
        assert not result.is_valid

    def test_empty_brand_never_matches(self):
        assert not check_brand_match("Pain relief", "").is_valid
        assert not check_brand_match("Pain relief", "   ").is_valid

"""Tests for corpus loading and lookups."""

import pytest

from idforge.config.locale_loader import (
    SUPPORTED_LOCALES,
    load_corpus_from_yaml,
    load_locale_corpus,
)
from idforge.core.locale_data import (
    FIRST_NAMES,
    JOB_TITLES,
    LAST_NAMES,
    LocaleData,
)
from idforge.errors import DataConfigurationError


REQUIRED_CATEGORIES = {
    "first_names",
    "last_names",
    "telephone_number_formats",
    "job_titles",
    "personal_email_domains",
    "company_names",
    "company_suffixes",
    "company_email_prefixes",
    "domain_suffixes",
    "streets",
    "cities",
    "postal_code_formats",
    "passport_number_formats",
}


class TestBundledCorpora:
    """Tests for the corpora shipped with the package."""

    @pytest.mark.parametrize("locale", SUPPORTED_LOCALES)
    def test_required_categories(self, locale):
        """Test that every locale carries the categories generation needs."""
        corpus = load_locale_corpus(locale)

        assert REQUIRED_CATEGORIES <= set(corpus)
        for key in ("male", "female"):
            assert corpus["first_names"][key]
            assert corpus["last_names"][key]

    def test_en_pattern_categories(self, en_corpus):
        assert en_corpus["identity_card_formats"]
        assert en_corpus["vat_formats"]

    def test_unsupported_locale(self):
        with pytest.raises(DataConfigurationError, match="Unsupported locale"):
            load_locale_corpus("xx")


class TestLoadCorpusFromYaml:
    """Tests for load_corpus_from_yaml()."""

    def test_parses_lists_and_mappings(self, tmp_path):
        path = tmp_path / "corpus.yaml"
        path.write_text(
            "job_titles:\n  - Baker\n  - 42\n"
            "first_names:\n  male: [Tom]\n  female: [Ann]\n",
            encoding="utf-8",
        )

        corpus = load_corpus_from_yaml(path)

        assert corpus["job_titles"] == ("Baker", "42")
        assert corpus["first_names"] == {"male": ("Tom",), "female": ("Ann",)}

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        assert load_corpus_from_yaml(path) == {}

    def test_missing_file(self, tmp_path):
        with pytest.raises(DataConfigurationError, match="not found"):
            load_corpus_from_yaml(tmp_path / "missing.yaml")

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("job_titles: [Baker\n", encoding="utf-8")

        with pytest.raises(DataConfigurationError, match="YAML parsing error"):
            load_corpus_from_yaml(path)

    def test_top_level_list(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- Baker\n", encoding="utf-8")

        with pytest.raises(DataConfigurationError, match="expected dict"):
            load_corpus_from_yaml(path)

    @pytest.mark.parametrize(
        "content",
        [
            "job_titles: Baker\n",
            "first_names:\n  male: Tom\n",
        ],
    )
    def test_bad_category_shape(self, tmp_path, content):
        """Test that scalars are rejected where lists are expected."""
        path = tmp_path / "shape.yaml"
        path.write_text(content, encoding="utf-8")

        with pytest.raises(DataConfigurationError):
            load_corpus_from_yaml(path)

    def test_overlay_replaces_categories(self, tmp_path):
        """Test that an overlay replaces bundled categories of the same name."""
        path = tmp_path / "overlay.yaml"
        path.write_text("job_titles:\n  - Astronaut\n", encoding="utf-8")

        corpus = load_locale_corpus("en", path)

        assert corpus["job_titles"] == ("Astronaut",)
        assert corpus["first_names"]["male"]


class TestLocaleData:
    """Tests for LocaleData lookups."""

    def test_values_of_type(self, en_locale_data, en_corpus):
        value = en_locale_data.values_of_type(FIRST_NAMES, "female")

        assert value in en_corpus["first_names"]["female"]

    def test_random_value(self, en_locale_data, en_corpus):
        assert en_locale_data.random_value(JOB_TITLES) in en_corpus["job_titles"]

    def test_values_of_type_without_key(self, en_locale_data, en_corpus):
        """Test that a plain category can be read through values_of_type()."""
        assert en_locale_data.values_of_type(JOB_TITLES) in en_corpus["job_titles"]

    def test_categories(self, en_locale_data):
        assert JOB_TITLES in en_locale_data.categories
        assert en_locale_data.has_category(LAST_NAMES)
        assert not en_locale_data.has_category("planets")

    def test_missing_category(self, en_locale_data):
        with pytest.raises(DataConfigurationError, match="No such category"):
            en_locale_data.random_value("planets")

    def test_missing_sub_key(self, en_locale_data):
        with pytest.raises(DataConfigurationError, match="'other'"):
            en_locale_data.values_of_type(FIRST_NAMES, "other")

    def test_keyed_category_needs_key(self, en_locale_data):
        with pytest.raises(DataConfigurationError, match="a key is required"):
            en_locale_data.random_value(FIRST_NAMES)

    def test_plain_category_rejects_key(self, en_locale_data):
        with pytest.raises(DataConfigurationError, match="not keyed"):
            en_locale_data.values_of_type(JOB_TITLES, "male")

    def test_empty_category(self, random_primitives):
        data = LocaleData("en", {"job_titles": (), "first_names": {"male": ()}}, random_primitives)

        with pytest.raises(DataConfigurationError, match="No values"):
            data.random_value(JOB_TITLES)
        with pytest.raises(DataConfigurationError, match="No values"):
            data.values_of_type(FIRST_NAMES, "male")

    def test_error_is_lookup_error(self, en_locale_data):
        with pytest.raises(LookupError):
            en_locale_data.random_value("planets")

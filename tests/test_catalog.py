"""Unit tests for the descriptor table (fhevm_examples.catalog).

Tests cover:
- ExampleDescriptor validation, immutability and derived paths
- get_example lookup and the unknown-identifier error
- list_examples / categories ordering
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from fhevm_examples.catalog import (
    EXAMPLES,
    ExampleDescriptor,
    categories,
    get_example,
    list_examples,
)
from fhevm_examples.errors import NotFoundError, UnknownExampleError


class TestExampleDescriptor:
    @pytest.mark.unit
    def test_default_output_path(self, make_example):
        example = make_example("my-example")
        assert example.output is None
        assert example.output_path == "docs/my-example.md"
        assert example.output_filename == "my-example.md"

    @pytest.mark.unit
    def test_explicit_output_path(self, make_example):
        example = make_example("x", output="guides/nested/page.md")
        assert example.output_path == "guides/nested/page.md"
        assert example.output_filename == "page.md"

    @pytest.mark.unit
    def test_test_filename(self, make_example):
        assert make_example("x", test="test/deep/Thing.ts").test_filename == "Thing.ts"

    @pytest.mark.unit
    def test_is_frozen(self, make_example):
        example = make_example("x")
        with pytest.raises(ValidationError):
            example.title = "changed"

    @pytest.mark.unit
    @pytest.mark.parametrize("bad", ["Upper-Case", "snake_case", "trailing-", "-leading", "a--b", ""])
    def test_identifier_must_be_kebab_case(self, make_example, bad):
        with pytest.raises(ValidationError):
            make_example(bad)

    @pytest.mark.unit
    def test_required_fields(self):
        with pytest.raises(ValidationError):
            ExampleDescriptor(identifier="x", title="X")


class TestDescriptorTable:
    @pytest.mark.unit
    def test_keys_match_identifiers(self):
        assert EXAMPLES
        for key, example in EXAMPLES.items():
            assert key == example.identifier

    @pytest.mark.unit
    def test_known_examples_present(self):
        for identifier in (
            "fhe-counter",
            "counter-comparison",
            "encryption-single",
            "encryption-multiple",
            "decryption-user",
            "decryption-public",
            "access-control",
            "anti-patterns",
            "privacy-prediction-basic",
            "privacy-prediction-fhe",
        ):
            assert identifier in EXAMPLES

    @pytest.mark.unit
    def test_output_filenames_are_unique(self):
        filenames = [e.output_filename for e in EXAMPLES.values()]
        assert len(filenames) == len(set(filenames))

    @pytest.mark.unit
    def test_get_example(self):
        example = get_example("privacy-prediction-basic")
        assert example.title == "Privacy Prediction Platform - Basic"
        assert example.contract == "contracts/PrivacyGuess.sol"
        assert example.category == "Advanced - Prediction Markets"

    @pytest.mark.unit
    def test_unknown_example_lists_all_identifiers(self):
        with pytest.raises(UnknownExampleError) as exc_info:
            get_example("does-not-exist")

        err = exc_info.value
        assert isinstance(err, NotFoundError)
        assert err.identifier == "does-not-exist"
        assert err.available == sorted(EXAMPLES)
        for identifier in EXAMPLES:
            assert f"  - {identifier}" in str(err)

    @pytest.mark.unit
    def test_list_examples_preserves_table_order(self):
        assert [e.identifier for e in list_examples()] == list(EXAMPLES)

    @pytest.mark.unit
    def test_list_examples_by_category(self):
        ids = [e.identifier for e in list_examples("Decryption")]
        assert ids == ["decryption-user", "decryption-public"]

    @pytest.mark.unit
    def test_categories_first_seen_order(self):
        assert categories() == [
            "Basic - Arithmetic",
            "Encryption",
            "Decryption",
            "Access Control",
            "Best Practices",
            "Advanced - Prediction Markets",
        ]

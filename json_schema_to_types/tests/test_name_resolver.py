#!/usr/bin/env python3

import pytest

from json_schema_to_types.pipeline.analyzer import LexicalReferenceResolver, NameResolver, ReservedWords, reserved_words_for
from json_schema_to_types.pipeline.config import CodeGeneratorConfig
from json_schema_to_types.pipeline.errors import ContextPath, UnsupportedLanguageError


class TestReservedWords:
    """Test cases for per-language reserved word tables"""

    def test_rust_substitutions(self):
        table = reserved_words_for("rust")

        assert table.substitute("type") == "ty"
        assert table.substitute("self") == "slf"
        assert table.substitute("match") == "match_"
        assert table.substitute("name") == "name"

    def test_python_keywords(self):
        table = reserved_words_for("python")

        assert table.substitute("class") == "class_"
        assert table.substitute("from") == "from_"
        assert table.substitute("type") == "type_"
        assert table.substitute("ty") == "ty"

    def test_python_soft_keywords_are_pinned(self):
        table = reserved_words_for("python")

        for word in ("match", "case", "type"):
            assert table.is_reserved(word)
        assert not table.is_reserved("print")
        assert not table.is_reserved("_")

    def test_python_generated_helpers_are_reserved(self):
        table = reserved_words_for("python")

        assert table.substitute("field") == "field_"
        assert table.substitute("json_config") == "json_config_"
        assert reserved_words_for("rust").substitute("field") == "field"

    def test_unknown_language(self):
        with pytest.raises(UnsupportedLanguageError):
            reserved_words_for("cobol")

    def test_config_extends_table(self):
        config = CodeGeneratorConfig(reserved_words=["data"], reserved_word_substitutions={"loop": "repeat"})
        table = reserved_words_for("rust", config)

        assert table.substitute("data") == "data_"
        assert table.substitute("loop") == "repeat"
        assert table.substitute("type") == "ty"
        # The built-in table is left untouched
        assert reserved_words_for("rust").substitute("data") == "data"

    def test_custom_suffix(self):
        table = ReservedWords(words={"end"}, suffix="Field")

        assert table.is_reserved("end")
        assert table.substitute("end") == "endField"


class TestNameResolver:
    """Test cases for name synthesis"""

    def setup_method(self):
        self.resolver = NameResolver(reserved_words_for("rust"))

    def test_child_name(self):
        assert self.resolver.child_name("Person", "home_address") == "PersonHomeAddress"
        assert self.resolver.child_name("Shape", "circle") == "ShapeCircle"

    def test_item_name(self):
        assert self.resolver.item_name("PersonAddresses") == "PersonAddress"

    def test_type_name(self):
        assert self.resolver.type_name("house_pet") == "HousePet"

    def test_field_identifier(self):
        assert self.resolver.field_identifier("name") == ("name", None)
        assert self.resolver.field_identifier("type") == ("ty", "type")
        assert self.resolver.field_identifier("e-mail") == ("e_mail", "e-mail")
        assert self.resolver.field_identifier("@") == ("field", "@")

    def test_field_identifier_avoids_taken_names(self):
        assert self.resolver.field_identifier("ty", {"ty"}) == ("ty_2", "ty")
        assert self.resolver.field_identifier("ty", {"ty", "ty_2"}) == ("ty_3", "ty")
        assert self.resolver.field_identifier("name", {"ty"}) == ("name", None)


class TestLexicalReferenceResolver:
    def test_does_not_require_target(self):
        resolver = LexicalReferenceResolver()
        context = ContextPath("Owner", "#/properties/owner")

        assert resolver.resolve("#/definitions/house_pet", context) == "HousePet"
        assert resolver.resolve("https://example.com/schemas/address.json", context) == "Address"
        assert resolver.resolve("#/definitions/items/", context) == "Items"


if __name__ == "__main__":
    pytest.main([__file__])

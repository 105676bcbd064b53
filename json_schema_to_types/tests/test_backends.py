"""
Tests for rendering type models as Rust and Python declarations.
"""

from __future__ import annotations

import ast
import json
from pathlib import Path

import pytest

from json_schema_to_types.pipeline import CodeGeneratorConfig, PipelineGenerator, UnsupportedLanguageError
from json_schema_to_types.pipeline.analyzer import TypeRef, TypeKind
from json_schema_to_types.pipeline.backends import PythonBackend, RustBackend, get_backend

SCHEMAS_DIR = Path(__file__).parent / "test_data" / "schemas"


def generate(schema, language, class_name="Root", **config_values):
    config = CodeGeneratorConfig(add_generation_comment=False, **config_values)
    return PipelineGenerator(class_name, schema, config, language).generate()


@pytest.fixture
def pet_store_schema():
    with open(SCHEMAS_DIR / "pet_store.schema.json") as f:
        return json.load(f)


class TestRustBackend:
    def test_type_references(self):
        backend = RustBackend(CodeGeneratorConfig())

        assert backend.translate_type(TypeRef.primitive(TypeKind.STRING)) == "String"
        assert backend.translate_type(TypeRef.primitive(TypeKind.INTEGER)) == "i64"
        assert backend.translate_type(TypeRef.primitive(TypeKind.NUMBER)) == "f64"
        assert backend.translate_type(TypeRef.primitive(TypeKind.BOOLEAN)) == "bool"
        assert backend.translate_type(TypeRef.primitive(TypeKind.NULL)) == "()"
        assert backend.translate_type(TypeRef.array(TypeRef.reference("Pet"))) == "Vec<Pet>"
        assert backend.translate_type(TypeRef.map(TypeRef.primitive(TypeKind.INTEGER))) == "HashMap<String, i64>"
        assert (
            backend.translate_type(TypeRef.optional(TypeRef.array(TypeRef.primitive(TypeKind.STRING))))
            == "Option<Vec<String>>"
        )

    def test_pet_store(self, pet_store_schema):
        code = generate(pet_store_schema, "rust", "PetStore")

        assert code.startswith("use serde::{Deserialize, Serialize};\nuse std::collections::HashMap;\n")
        assert "/// A pet store\n#[derive(Serialize, Deserialize, Clone, Debug)]\npub struct PetStore {" in code
        assert "    pub name: String,\n" in code
        assert "    pub pets: Vec<Pet>,\n" in code
        assert "    pub inventory: Option<HashMap<String, i64>>,\n" in code
        assert "    pub owner: Option<PetStoreOwner>,\n" in code
        assert '    #[serde(rename = "type")]\n    pub ty: String,\n' in code
        assert "    pub kind: PetKind,\n" in code
        assert "#[serde(untagged)]\npub enum PetKind {\n    PetKindDog(PetKindDog),\n    PetKindName(String),\n}" in code
        assert "    pub barks: Option<bool>,\n" in code

    def test_self_reference_is_boxed(self, pet_store_schema):
        code = generate(pet_store_schema, "rust", "PetStore")

        assert "    pub parent: Option<Box<Pet>>,\n" in code
        # Vec already provides indirection
        assert "Vec<Box<Pet>>" not in code

    def test_mutual_references_are_boxed(self):
        schema = {
            "definitions": {
                "node": {"type": "object", "properties": {"edge": {"$ref": "#/definitions/edge"}}},
                "edge": {
                    "type": "object",
                    "properties": {
                        "target": {"$ref": "#/definitions/node"},
                        "label": {"$ref": "#/definitions/label"},
                    },
                },
                "label": {"type": "object", "properties": {"text": {"type": "string"}}},
            }
        }
        code = generate(schema, "rust")

        assert "pub edge: Option<Box<Edge>>," in code
        assert "pub target: Option<Box<Node>>," in code
        assert "pub label: Option<Label>," in code

    def test_boxed_edges_ignore_collections(self):
        schema = {
            "definitions": {
                "tree": {
                    "type": "object",
                    "properties": {
                        "children": {"type": "array", "items": {"$ref": "#/definitions/tree"}},
                        "by_name": {"type": "object", "patternProperties": {".*": {"$ref": "#/definitions/tree"}}},
                    },
                }
            }
        }
        code = generate(schema, "rust")

        assert "pub children: Option<Vec<Tree>>," in code
        assert "pub by_name: Option<HashMap<String, Tree>>," in code
        assert "Box<" not in code

    def test_colliding_field_names(self):
        schema = {"type": "object", "properties": {"type": {"type": "string"}, "ty": {"type": "integer"}}}
        code = generate(schema, "rust")

        assert code.count("pub ty:") == 1
        assert '    #[serde(rename = "type")]\n    pub ty: Option<String>,\n' in code
        assert '    #[serde(rename = "ty")]\n    pub ty_2: Option<i64>,\n' in code

    def test_empty_object(self):
        code = generate({"type": "object", "properties": {}}, "rust", "Empty")

        assert "pub struct Empty {}" in code
        assert "HashMap" not in code

    def test_custom_derives(self):
        code = generate({"type": "object", "properties": {"a": {"type": "string"}}}, "rust", rust_derives=["Serialize", "Deserialize", "PartialEq"])

        assert "#[derive(Serialize, Deserialize, PartialEq)]" in code

    def test_generation_comment(self):
        config = CodeGeneratorConfig()
        code = PipelineGenerator("Root", {"type": "object", "properties": {"a": {"type": "string"}}}, config, "rust").generate()

        assert code.startswith("// Generated by json_schema_to_types v")


class TestPythonBackend:
    def test_type_references(self):
        backend = PythonBackend(CodeGeneratorConfig())

        assert backend.translate_type(TypeRef.primitive(TypeKind.STRING)) == "str"
        assert backend.translate_type(TypeRef.primitive(TypeKind.NUMBER)) == "float"
        assert backend.translate_type(TypeRef.array(TypeRef.reference("Pet"))) == "list[Pet]"
        assert backend.translate_type(TypeRef.map(TypeRef.primitive(TypeKind.INTEGER))) == "dict[str, int]"
        assert backend.translate_type(TypeRef.optional(TypeRef.reference("Pet"))) == "Pet | None"
        assert backend.translate_type(TypeRef.optional(TypeRef.primitive(TypeKind.NULL))) == "Optional[None]"

    def test_pet_store(self, pet_store_schema):
        code = generate(pet_store_schema, "python", "PetStore")

        assert "from dataclasses import dataclass, field\n" in code
        assert "from dataclasses_json import config as json_config\n" in code
        assert "@dataclass_json\n@dataclass(kw_only=True)\nclass PetStore:\n" in code
        assert "    name: str\n" in code
        assert "    pets: list[Pet]\n" in code
        assert "    inventory: dict[str, int] | None = None\n" in code
        assert "    owner: PetStoreOwner | None = None\n" in code
        assert '    type_: str = field(metadata=json_config(field_name="type"))\n' in code
        assert "    parent: Pet | None = None\n" in code
        assert "class PetKindName:\n    value: str\n" in code
        assert "PetKind = PetKindDog | PetKindName\n" in code

    def test_output_is_valid_python(self, pet_store_schema):
        code = generate(pet_store_schema, "python", "PetStore")
        tree = ast.parse(code)

        classes = {node.name for node in ast.walk(tree) if isinstance(node, ast.ClassDef)}
        assert classes == {"PetStore", "PetStoreOwner", "Pet", "PetKindDog", "PetKindName"}

    def test_union_alias_follows_classes(self, pet_store_schema):
        code = generate(pet_store_schema, "python", "PetStore")

        assert code.index("PetKind = ") > code.index("class PetKindDog:")
        assert code.index("PetKind = ") > code.index("class PetKindName:")

    def test_plain_dataclasses_can_be_executed(self, pet_store_schema):
        code = generate(pet_store_schema, "python", "PetStore", python_dataclass_json=False)

        assert "dataclasses_json" not in code
        assert '    type_: str = field(metadata={"json_name": "type"})\n' in code

        namespace = {}
        exec(compile(code, "pet_store.py", "exec"), namespace)

        owner = namespace["PetStoreOwner"](type_="admin")
        store = namespace["PetStore"](name="Paws", pets=[], owner=owner)
        assert store.inventory is None
        assert store.owner.type_ == "admin"

    def test_helper_names_are_not_shadowed(self):
        schema = {
            "type": "object",
            "properties": {"field": {"type": "string"}, "class": {"type": "string"}},
            "required": ["class"],
        }
        code = generate(schema, "python", "Root", python_dataclass_json=False)

        assert '    field_: str | None = field(default=None, metadata={"json_name": "field"})\n' in code

        namespace = {}
        exec(compile(code, "root.py", "exec"), namespace)

        root = namespace["Root"](class_="senior")
        assert root.field_ is None
        assert root.class_ == "senior"

    def test_wrapper_does_not_replace_item_class(self):
        schema = {
            "oneOf": [
                {"id": "pet", "type": "array", "items": {"type": "object", "properties": {"name": {"type": "string"}}}},
                {"id": "name", "type": "string"},
            ]
        }
        code = generate(schema, "python", "Root", python_dataclass_json=False)

        assert code.count("class RootPet:") == 1
        assert "class RootPetValue:\n    value: list[RootPet]\n" in code
        assert "Root = RootPetValue | RootName\n" in code

        namespace = {}
        exec(compile(code, "root.py", "exec"), namespace)

        pets = namespace["RootPetValue"](value=[namespace["RootPet"](name="Rex")])
        assert pets.value[0].name == "Rex"

    def test_wrapper_does_not_replace_map_value_class(self):
        schema = {
            "oneOf": [
                {
                    "id": "tags",
                    "type": "object",
                    "patternProperties": {".*": {"type": "object", "properties": {"count": {"type": "integer"}}}},
                }
            ]
        }
        code = generate(schema, "python", "Root")

        assert code.count("class RootTags:") == 1
        assert "class RootTagsValue:\n    value: dict[str, RootTags]\n" in code
        assert "Root = RootTagsValue\n" in code

    def test_optional_renamed_field(self):
        schema = {"type": "object", "properties": {"class": {"type": "string"}}}
        code = generate(schema, "python", "Lesson")

        assert '    class_: str | None = field(default=None, metadata=json_config(field_name="class"))\n' in code

    def test_empty_object(self):
        code = generate({"type": "object", "properties": {}}, "python", "Empty")

        assert "class Empty:\n    pass\n" in code

    def test_description_docstring(self):
        schema = {"type": "object", "description": "A thing", "properties": {"a": {"type": "string"}}}
        code = generate(schema, "python", "Thing")

        assert 'class Thing:\n    """\n    A thing\n    """\n\n    a: str | None = None\n' in code


class TestBackendRegistry:
    def test_get_backend(self):
        assert isinstance(get_backend("rust", CodeGeneratorConfig()), RustBackend)
        assert isinstance(get_backend("python", CodeGeneratorConfig()), PythonBackend)

    def test_unknown_language(self):
        with pytest.raises(UnsupportedLanguageError):
            get_backend("cs", CodeGeneratorConfig())

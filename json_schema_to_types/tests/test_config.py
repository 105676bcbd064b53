import unittest

from json_schema_to_types.pipeline.config import DEFAULT_MAX_DEPTH, CodeGeneratorConfig, VariantNaming


class TestCodeGeneratorConfig(unittest.TestCase):
    def test_defaults(self):
        config = CodeGeneratorConfig()

        self.assertTrue(config.add_generation_comment)
        self.assertEqual(config.variant_naming, VariantNaming.REQUIRE_ID)
        self.assertEqual(config.max_depth, DEFAULT_MAX_DEPTH)
        self.assertEqual(config.rust_derives, ["Serialize", "Deserialize", "Clone", "Debug"])

    def test_from_dict(self):
        config = CodeGeneratorConfig.from_dict({"variant_naming": "positional", "max_depth": 8, "unknown_key": 1})

        self.assertEqual(config.variant_naming, VariantNaming.POSITIONAL)
        self.assertEqual(config.max_depth, 8)
        self.assertFalse(hasattr(config, "unknown_key"))

    def test_invalid_variant_naming(self):
        with self.assertRaises(ValueError):
            CodeGeneratorConfig.from_dict({"variant_naming": "by-index"})

    def test_round_trip(self):
        config = CodeGeneratorConfig(reserved_words=["data"], python_dataclass_json=False)

        self.assertEqual(CodeGeneratorConfig.from_dict(config.to_dict()), config)


if __name__ == "__main__":
    unittest.main()

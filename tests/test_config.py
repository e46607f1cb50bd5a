import tempfile
import unittest
from pathlib import Path

from bigrat import Config, load_config
from bigrat.config import DEFAULT_FLOAT_PRECISION, parse_float_format


class FloatFormatTests(unittest.TestCase):
    def test_precision_and_verb(self):
        self.assertEqual(parse_float_format("%.12f"), ("f", 12, True))
        self.assertEqual(parse_float_format("%10.4E"), ("E", 4, True))
        self.assertEqual(parse_float_format("%.f"), ("f", DEFAULT_FLOAT_PRECISION, True))

    def test_default_precision(self):
        self.assertEqual(parse_float_format("%e"), ("e", DEFAULT_FLOAT_PRECISION, True))

    def test_non_float_formats(self):
        self.assertFalse(parse_float_format("%d")[2])
        self.assertFalse(parse_float_format("")[2])
        self.assertFalse(parse_float_format("plain f")[2])

    def test_g_verb_is_reported_as_float(self):
        self.assertEqual(parse_float_format("%.3g"), ("g", 3, True))


class ConfigTests(unittest.TestCase):
    def test_defaults(self):
        config = Config()
        self.assertEqual(config.input_base, 0)
        self.assertEqual(config.output_base, 0)
        self.assertEqual(config.output_format, "")
        self.assertFalse(config.float_format()[2])
        self.assertEqual(config.rat_format(), "%s/%s")

    def test_rat_format_repeats_template(self):
        self.assertEqual(Config(output_format="%x").rat_format(), "%x/%x")

    def test_invalid_values(self):
        with self.assertRaises(ValueError):
            Config(input_base=1)
        with self.assertRaises(ValueError):
            Config(output_base=37)
        with self.assertRaises(ValueError):
            Config(output_format="no slots")
        with self.assertRaises(ValueError):
            Config(output_format="%q")

    def test_frozen(self):
        config = Config()
        with self.assertRaises(AttributeError):
            config.input_base = 16

    def test_from_mapping(self):
        config = Config.from_mapping({"input_base": 16, "format": "%.3e"})
        self.assertEqual(config, Config(input_base=16, output_format="%.3e"))

    def test_load_config_from_toml(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.toml"
            path.write_text('input_base = 8\noutput_base = 2\nformat = "%.2f"\n')
            config = load_config(path)
        self.assertEqual(config.input_base, 8)
        self.assertEqual(config.output_base, 2)
        self.assertEqual(config.float_format(), ("f", 2, True))


if __name__ == "__main__":  # pragma: no cover - direct execution helper
    unittest.main()

import unittest

from bigrat import Config, ParseError, Rational, format_rational, parse_rational


class DecimalParseTests(unittest.TestCase):
    def test_fraction_literal(self):
        self.assertEqual(parse_rational("1/3", Config()), Rational(1, 3))
        self.assertEqual(parse_rational("-6/4", Config(input_base=10)), Rational(-3, 2))

    def test_integer_and_decimal_literals(self):
        self.assertEqual(parse_rational("3", Config()), Rational(3, 1))
        self.assertEqual(parse_rational("1.25", Config()), Rational(5, 4))
        self.assertEqual(parse_rational("-2e-3", Config()), Rational(-1, 500))

    def test_result_is_canonical(self):
        value = parse_rational("10/20", Config())
        self.assertEqual((value.numerator, value.denominator), (1, 2))

    def test_syntax_errors(self):
        for text in ("abc", "1/", "/2", "1//2", "", "2/-3"):
            with self.assertRaises(ParseError, msg=text) as ctx:
                parse_rational(text, Config())
            self.assertEqual(str(ctx.exception), "rational number syntax")

    def test_zero_denominator(self):
        with self.assertRaises(ParseError):
            parse_rational("1/0", Config())

    def test_classmethod_uses_default_config(self):
        self.assertEqual(Rational.parse("7/21"), Rational(1, 3))


class BasedParseTests(unittest.TestCase):
    def test_hexadecimal(self):
        self.assertEqual(parse_rational("ff/10", Config(input_base=16)), Rational(255, 16))

    def test_binary_and_octal(self):
        self.assertEqual(parse_rational("101/11", Config(input_base=2)), Rational(5, 3))
        self.assertEqual(parse_rational("-7/10", Config(input_base=8)), Rational(-7, 8))

    def test_splits_on_first_slash(self):
        with self.assertRaises(ParseError) as ctx:
            parse_rational("1/2/3", Config(input_base=16))
        self.assertEqual(str(ctx.exception), "integer number syntax")

    def test_integer_errors_propagate(self):
        with self.assertRaises(ParseError) as ctx:
            parse_rational("zz/1", Config(input_base=16))
        self.assertEqual(str(ctx.exception), "integer number syntax")
        with self.assertRaises(ParseError):
            parse_rational("1/9", Config(input_base=8))

    def test_only_sign_and_digits_in_explicit_base(self):
        config = Config(input_base=16)
        for text in ("0xff/10", " ff/10", "ff /10", "f_f/10", "ff/+", "-/1", "ff/1 0"):
            with self.assertRaises(ParseError, msg=text) as ctx:
                parse_rational(text, config)
            self.assertEqual(str(ctx.exception), "integer number syntax")
        self.assertEqual(parse_rational("+FF/-10", config), Rational(-255, 16))

    def test_zero_denominator(self):
        with self.assertRaises(ParseError):
            parse_rational("ff/0", Config(input_base=16))

    def test_no_slash_uses_native_grammar(self):
        self.assertEqual(parse_rational("12", Config(input_base=16)), Rational(12, 1))


class RoundTripTests(unittest.TestCase):
    def test_integral_values_round_trip(self):
        config = Config()
        for n in (0, 7, -42, 10**30, -(10**45) + 1):
            value = Rational(n, 1)
            self.assertEqual(parse_rational(format_rational(value, config), config), value)

    def test_based_round_trip(self):
        config = Config(input_base=16, output_base=16)
        value = Rational(-(2**70) + 3, 2**40 + 1)
        self.assertEqual(parse_rational(format_rational(value, config), config), value)


if __name__ == "__main__":  # pragma: no cover - direct execution helper
    unittest.main()

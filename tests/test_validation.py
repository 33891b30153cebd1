from unittest import TestCase

from admin_panel.core.passwords import PASSWORD_ALPHABET, generate_password
from admin_panel.core.validation import is_valid_email, is_valid_name, is_valid_password


class PasswordGeneratorTests(TestCase):
    def test_alphabet_has_68_characters(self):
        self.assertEqual(len(PASSWORD_ALPHABET), 68)
        self.assertEqual(len(set(PASSWORD_ALPHABET)), 68)

    def test_default_length_is_12(self):
        self.assertEqual(len(generate_password()), 12)

    def test_exact_length_and_alphabet(self):
        for length in (1, 6, 12, 64):
            password = generate_password(length)
            self.assertEqual(len(password), length)
            self.assertTrue(set(password) <= set(PASSWORD_ALPHABET))

    def test_non_positive_length_rejected(self):
        with self.assertRaises(ValueError):
            generate_password(0)


class ValidationTests(TestCase):
    def test_email_shape(self):
        self.assertTrue(is_valid_email("a@b.com"))
        self.assertTrue(is_valid_email("first.last@sub.example.org"))
        for bad in ("a@b", "a.com", "", "a b@c.com", "a@@b.com", "@b.com", "a@b.com\n", "\na@b.com"):
            self.assertFalse(is_valid_email(bad), bad)

    def test_password_minimum(self):
        self.assertFalse(is_valid_password("short"))
        self.assertTrue(is_valid_password("123456"))

    def test_name_is_trimmed(self):
        self.assertFalse(is_valid_name(" a "))
        self.assertFalse(is_valid_name(""))
        self.assertTrue(is_valid_name("Al"))

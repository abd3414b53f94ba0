"""
Tests para utilidades HMAC y conversión de montos.
"""

import hashlib
import hmac
from decimal import Decimal

import pytest

from razorpay_backend.utils.amounts import to_minor_units
from razorpay_backend.utils.hmac_utils import (
    build_payment_message,
    generate_payment_signature,
    generate_signature,
    verify_payment_signature,
    verify_signature,
)


HEX_DIGITS = "0123456789abcdef"


class TestHMACUtils:
    """Tests para utilidades HMAC."""

    def test_generate_signature(self):
        """Test generación de firma."""
        signature = generate_signature(b"test payload", "test-secret")

        assert isinstance(signature, str)
        assert len(signature) == 64  # SHA256 hex
        assert signature == signature.lower()

    def test_generate_signature_known_vector(self):
        """Test contra un vector HMAC-SHA256 conocido."""
        signature = generate_signature(
            b"The quick brown fox jumps over the lazy dog",
            "key",
        )

        assert signature == "f7bc83f430538424b13298e6aa6fb143ef4d59a14946175997479dbc2d1a3cd8"

    def test_str_and_bytes_secret_are_equivalent(self):
        assert generate_signature(b"payload", "s3cr3t") == generate_signature(b"payload", b"s3cr3t")

    def test_verify_signature_valid(self):
        """Test verificación de firma válida."""
        payload = b"test payload"
        signature = generate_signature(payload, "test-secret")

        assert verify_signature(payload, signature, "test-secret") is True

    def test_verify_signature_wrong_secret(self):
        """Test verificación con secret incorrecto."""
        signature = generate_signature(b"test payload", "secret-1")

        assert verify_signature(b"test payload", signature, "secret-2") is False

    @pytest.mark.parametrize(
        "candidate",
        [None, 123, b"bytes", "", "invalid", "zz" * 32, "é" * 64, "\ud800" * 64],
    )
    def test_verify_signature_malformed_never_raises(self, candidate):
        """Test que firmas mal formadas retornan False sin lanzar."""
        assert verify_signature(b"test payload", candidate, "test-secret") is False

    def test_verify_signature_uppercase_hex_rejected(self):
        """La comparación es exacta sobre el hex en minúsculas."""
        signature = generate_signature(b"test payload", "test-secret")

        assert verify_signature(b"test payload", signature.upper(), "test-secret") is False

    def test_every_single_character_change_rejected(self):
        """Cambiar cualquier carácter hex de la firma la invalida."""
        payload = build_payment_message("order_ABC", "pay_XYZ")
        signature = generate_signature(payload, "s3cr3t")

        for position, original in enumerate(signature):
            replacement = HEX_DIGITS[(HEX_DIGITS.index(original) + 1) % 16]
            tampered = signature[:position] + replacement + signature[position + 1:]
            assert verify_signature(payload, tampered, "s3cr3t") is False

    def test_empty_secret_still_compares(self):
        """Un secret vacío no es un error en esta capa."""
        signature = hmac.new(b"", b"payload", hashlib.sha256).hexdigest()

        assert verify_signature(b"payload", signature, "") is True
        assert verify_signature(b"payload", signature, None) is True
        assert verify_signature(b"payload", "0" * 64, "") is False

    def test_build_payment_message_does_not_escape(self):
        assert build_payment_message("order_ABC", "pay_XYZ") == b"order_ABC|pay_XYZ"
        assert build_payment_message("a|b", "c") == b"a|b|c"

    def test_lone_surrogate_id_is_a_mismatch(self):
        """Un id con un surrogate suelto se firma igual y simplemente no coincide."""
        message = build_payment_message("order_\ud800", "pay_XYZ")

        assert message == b"order_\xed\xa0\x80|pay_XYZ"
        assert verify_payment_signature("order_\ud800", "pay_XYZ", "0" * 64, "s3cr3t") is False

    def test_payment_signature_scenario(self):
        """order_ABC / pay_XYZ firmado con s3cr3t."""
        expected = hmac.new(b"s3cr3t", b"order_ABC|pay_XYZ", hashlib.sha256).hexdigest()

        assert generate_payment_signature("order_ABC", "pay_XYZ", "s3cr3t") == expected
        assert verify_payment_signature("order_ABC", "pay_XYZ", expected, "s3cr3t") is True
        assert verify_payment_signature("order_ABC", "pay_OTHER", expected, "s3cr3t") is False


class TestAmounts:
    """Tests para la conversión rupias -> paise."""

    @pytest.mark.parametrize(
        "amount, expected",
        [
            (1, 100),
            (500, 50000),
            (499.99, 49999),
            (0.29, 29),
            (1.005, 101),
            (10.005, 1001),
            (0.125, 13),
            (0.001, 0),
            (Decimal("12.345"), 1235),
            (1e30, 10**32),
            (10**30, 10**32),
            (1e300, 10**302),
            (Decimal("123456789012345678901234567890.125"), 12345678901234567890123456789013),
        ],
    )
    def test_to_minor_units_rounds_half_away_from_zero(self, amount, expected):
        assert to_minor_units(amount) == expected

    def test_to_minor_units_returns_int(self):
        assert isinstance(to_minor_units(10.5), int)

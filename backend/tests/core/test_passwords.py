"""Password hashing — tests for salted PBKDF2 encode/verify."""

from forum.core.passwords import ALGORITHM, hash_password, verify_password


def test_hash_has_four_parts():
    encoded = hash_password("s3cret-pass", iterations=1000)
    algorithm, iterations, salt, digest = encoded.split("$")
    assert algorithm == ALGORITHM
    assert iterations == "1000"
    assert len(salt) == 32
    assert len(digest) == 64


def test_same_password_gets_different_salts():
    assert hash_password("pw-123456", 1000) != hash_password("pw-123456", 1000)


def test_verify_accepts_correct_password():
    encoded = hash_password("s3cret-pass", iterations=1000)
    assert verify_password("s3cret-pass", encoded) is True


def test_verify_rejects_wrong_password():
    encoded = hash_password("s3cret-pass", iterations=1000)
    assert verify_password("S3cret-pass", encoded) is False


def test_verify_rejects_malformed_hash():
    assert verify_password("anything", "not-a-hash") is False
    assert verify_password("anything", "pbkdf2_sha256$abc$zz$zz") is False


def test_verify_rejects_unknown_algorithm():
    encoded = hash_password("s3cret-pass", iterations=1000)
    tampered = encoded.replace(ALGORITHM, "md5", 1)
    assert verify_password("s3cret-pass", tampered) is False

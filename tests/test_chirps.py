import pytest

from chirpy.chirps import (
    MASK,
    MAX_CHIRP_LENGTH,
    ChirpDecodeError,
    ChirpTooLongError,
    clean_body,
    decode_chirp,
    validate_chirp,
)


class TestCleanBody:
    """Length check and banned word masking."""

    def test_clean_chirp_is_unchanged(self):
        body = "I had something interesting for breakfast"
        assert clean_body(body) == body

    def test_banned_word_is_masked(self):
        body = "I hear Mastodon is better than Chirper. sharbert I should probably migrate"
        assert clean_body(body) == "I hear Mastodon is better than Chirper. **** I should probably migrate"

    @pytest.mark.parametrize("word", ["kerfuffle", "SHARBERT", "Fornax"])
    def test_match_is_case_insensitive(self, word):
        assert clean_body(f"what a {word} today") == f"what a {MASK} today"

    def test_every_banned_word_is_masked(self):
        assert clean_body("kerfuffle sharbert fornax") == "**** **** ****"

    def test_punctuation_prevents_a_match(self):
        assert clean_body("Sharbert! fornax.") == "Sharbert! fornax."

    def test_substrings_are_not_masked(self):
        assert clean_body("kerfuffles sharberts") == "kerfuffles sharberts"

    def test_repeated_spaces_are_preserved(self):
        body = "two  spaces   three"
        assert clean_body(body) == body

    def test_max_length_is_accepted(self):
        body = "a" * MAX_CHIRP_LENGTH
        assert clean_body(body) == body

    def test_one_over_max_length_is_rejected(self):
        with pytest.raises(ChirpTooLongError) as exc_info:
            clean_body("a" * (MAX_CHIRP_LENGTH + 1))
        assert "too long" in exc_info.value.message
        assert exc_info.value.status_code == 400

    def test_long_chirp_is_rejected_even_with_banned_words(self):
        with pytest.raises(ChirpTooLongError):
            clean_body("fornax " * 30)

    def test_length_counts_characters_not_bytes(self):
        body = "é" * MAX_CHIRP_LENGTH
        assert clean_body(body) == body

    def test_empty_body(self):
        assert clean_body("") == ""


class TestDecodeChirp:
    """Turning raw request bytes into a Chirp."""

    def test_decodes_body(self):
        assert decode_chirp(b'{"body": "hello"}').body == "hello"

    def test_unknown_fields_are_ignored(self):
        assert decode_chirp(b'{"body": "hello", "extra": 1}').body == "hello"

    def test_missing_body_is_empty(self):
        assert validate_chirp(b"{}") == ""

    def test_null_body_is_empty(self):
        assert validate_chirp(b'{"body": null}') == ""

    @pytest.mark.parametrize("raw", [b"", b"{not json", b"[]", b'"just a string"', b'{"body": 5}'])
    def test_malformed_input_is_a_decode_error(self, raw):
        with pytest.raises(ChirpDecodeError) as exc_info:
            decode_chirp(raw)
        assert exc_info.value.status_code == 500
        assert exc_info.value.message

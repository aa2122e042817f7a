"""Short code generation utilities."""

import secrets
import string


class ShortCodeGenerator:
    """Generate short codes for URLs."""

    # Base62 characters: digits, then uppercase, then lowercase
    BASE62_CHARS = string.digits + string.ascii_uppercase + string.ascii_lowercase

    # Codes are sampled from the full unsigned 64-bit range
    RANDOM_BITS = 64

    def __init__(self, max_length: int = 8):
        """Initialize short code generator.

        Args:
            max_length: Maximum length of generated codes
        """
        self.max_length = max_length

    def generate(self) -> str:
        """Generate a random short code.

        A uniformly random 64-bit integer is base62-encoded and cut down to
        ``max_length`` characters. Small samples encode to fewer characters,
        so codes may be shorter than ``max_length``. No uniqueness check is
        made.

        Returns:
            Random short code
        """
        number = secrets.randbits(self.RANDOM_BITS)
        return self.encode_base62(number)[:self.max_length]

    @classmethod
    def encode_base62(cls, num: int) -> str:
        """Convert a non-negative integer to a base62 string.

        Args:
            num: Integer to convert

        Returns:
            Base62 string
        """
        if num < 0:
            raise ValueError("Cannot encode a negative number")

        if num == 0:
            return cls.BASE62_CHARS[0]

        result = []
        base = len(cls.BASE62_CHARS)

        while num > 0:
            num, remainder = divmod(num, base)
            result.append(cls.BASE62_CHARS[remainder])

        return ''.join(reversed(result))

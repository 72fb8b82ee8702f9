# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

"""
Dean Edwards p,a,c,k,e,d çözücü.

    eval(function(p,a,c,k,e,d){...}('0 1 2',36,3,'foo|bar|baz'.split('|'),0,{}))

Payload içindeki her kelime, taban-N gösterimi sözlükteki sırasına karşılık gelen kelimeyle değiştirilir.
"""

from __future__ import annotations
import re

# HTML içinde packed bloğu bulmak için
PACKED_REGEX = r"(eval\s*\(\s*function\s*\(\s*p\s*,\s*a\s*,\s*c\s*,\s*k\s*,\s*e\s*,\s*[dr]\s*\)[\s\S]+?)<\/script>"

SIGNATURE_REGEX = re.compile(
    r"eval\s*\(\s*function\s*\(\s*p\s*,\s*a\s*,\s*c\s*,\s*k\s*,\s*e\s*,\s*[dr]\s*\)\s*\{.*?\}\s*\(\s*"
    r"(['\"])(.*?)\1\s*,\s*(\d+)\s*,\s*(\d+)\s*,\s*"
    r"(['\"])(.*?)\5\s*\.split\(\s*['\"]\|['\"]\s*\)",
    re.DOTALL
)

# 36'ya kadar olan tabanlar için 0-9a-z, üstü için A-Z devam eder
ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"

_CODE_ESCAPES   = re.compile(r"\\x([0-9a-fA-F]{2})|\\u([0-9a-fA-F]{4})")
_SIMPLE_ESCAPES = re.compile(r"\\(['\"\\nrt])")
_SIMPLE_MAP     = {"'": "'", '"': '"', "\\": "\\", "n": "\n", "r": "\r", "t": "\t"}


class Packer:
    @staticmethod
    def detect(text: str) -> bool:
        return bool(SIGNATURE_REGEX.search(text or ""))

    @staticmethod
    def unescape(payload: str) -> str:
        # Önce \xHH ve \uHHHH, ardından tek karakterlik kaçışlar
        payload = _CODE_ESCAPES.sub(lambda m: chr(int(m.group(1) or m.group(2), 16)), payload)
        return _SIMPLE_ESCAPES.sub(lambda m: _SIMPLE_MAP[m.group(1)], payload)

    @staticmethod
    def to_base(number: int, base: int) -> str:
        digits = []
        while number > 0:
            number, kalan = divmod(number, base)
            digits.append(ALPHABET[kalan])

        return "".join(reversed(digits)) or "0"

    @staticmethod
    def symbol_table(base: int, count: int, dictionary: list[str]) -> dict[str, str]:
        """Boş sözlük girdileri kendi gösterimine eşlenir."""
        table = {}
        for index in range(count - 1, -1, -1):
            key        = Packer.to_base(index, base)
            word       = dictionary[index] if index < len(dictionary) else ""
            table[key] = word or key

        return table

    @staticmethod
    def unpack(script_text: str) -> str | None:
        """
        Packed JS'yi açar.

        Returns:
            Açılmış JS kaynağı; imza yoksa veya sonuç boşsa None
        """
        match = SIGNATURE_REGEX.search(script_text or "")
        if not match:
            return None

        _, payload, base, count, _, dictionary = match.groups()
        base, count = int(base), int(count)
        if not 2 <= base <= len(ALPHABET):
            return None

        table    = Packer.symbol_table(base, count, dictionary.split("|"))
        unpacked = re.sub(r"\w+", lambda m: table.get(m.group(0), m.group(0)), Packer.unescape(payload))

        return unpacked if unpacked.strip() else None

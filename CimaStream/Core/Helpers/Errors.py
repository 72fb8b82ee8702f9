# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

"""Çözücü hataları: tek bir parça/token'ı etkiler, tüm çözümü asla durdurmaz."""


class DecodeError(ValueError):
    """Çözücülerin ortak hata sınıfı."""


class MalformedChunk(DecodeError):
    """base64 parçası çözülemedi ya da içinden rakam çıkmadı."""


class InvalidCodepoint(DecodeError):
    """Çözülen sayı geçerli Unicode aralığının [0, 0x10FFFF] dışında."""

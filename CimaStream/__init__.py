# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from KONTROL import MainUrlGuncelleyici


def test_only_project_version_is_bumped(tmp_path):
    (tmp_path / "pyproject.toml").write_text(
        '[project]\n'
        'name    = "CimaStream"\n'
        'version = "1.0.0"\n'
        'dependencies = ["Kekik>=1.0.0", "pydantic>=2"]\n',
        encoding="utf-8",
    )

    MainUrlGuncelleyici(ana_dizin=str(tmp_path))._pyproject_surum_guncelle()

    icerik = (tmp_path / "pyproject.toml").read_text(encoding="utf-8")
    assert 'version = "1.0.1"' in icerik
    assert '"Kekik>=1.0.0"' in icerik

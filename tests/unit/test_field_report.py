from spaceenv.examples import field_report
from spaceenv.examples.field_report import main


def test_report_for_sample_sites(capsys):
    assert main([]) == 0

    out = capsys.readouterr().out
    assert "IGRF Field Report - 2015.000" in out
    assert "North Pole" in out
    assert out.count("Total intensity") == 4


def test_report_for_requested_site(capsys):
    assert main(["--date", "2010.5", "--lat", "-23.55", "--lon", "-46.63", "--alt", "0.76"]) == 0

    out = capsys.readouterr().out
    assert "Requested site" in out
    assert out.count("Declination") == 1


def test_verbose_flag_reaches_logging_setup(monkeypatch, capsys):
    levels = []
    monkeypatch.setattr(field_report, "setup_logging", levels.append)

    assert main(["--lat", "10", "--verbose"]) == 0
    assert main(["--lat", "10"]) == 0
    assert levels == [True, False]


def test_report_with_coefficient_file(tmp_path, capsys):
    path = tmp_path / "dipole.txt"
    path.write_text(
        "c/s deg ord IGRF IGRF SV\n"
        "g/h n m 2010.0 2015.0 2015-20\n"
        "g 1 0 -29496.6 -29442.0 10.3\n"
        "g 1 1 -1586.4 -1501.0 18.1\n"
        "h 1 1 4944.3 4797.1 -26.6\n",
        encoding="utf-8",
    )

    assert main(["--coefficients", str(path), "--date", "2012.0", "--lat", "45"]) == 0
    assert "Requested site" in capsys.readouterr().out

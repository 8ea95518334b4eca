from etl import report


def test_format_rating_annotated():
    assert report.format_rating("AtCoder", 1432) == "AtCoder rating: 1432"


def test_format_rating_numbers_only():
    assert report.format_rating("AtCoder", 1432, numbers_only=True) == "1432"


def test_print_rating_skips_missing(capsys):
    report.print_rating("AtCoder", None)
    assert capsys.readouterr().out == ""

from ingest import accounts
from ingest.accounts import PlatformConfig

PLATFORMS = ["Codeforces", "CodeChef", "AtCoder"]


def _answers(*values):
    it = iter(values)
    return lambda _prompt: next(it)


def test_line_format(data_dir):
    accounts.save_accounts([PlatformConfig("Codeforces", "alice", 1000), PlatformConfig("AtCoder", "", 1000)])

    assert (data_dir / "accounts.txt").read_text() == "Codeforces=alice|1000\nAtCoder=|1000\n"
    loaded = accounts.load_accounts()
    assert loaded["Codeforces"] == PlatformConfig("Codeforces", "alice", 1000)
    assert loaded["AtCoder"].username == ""


def test_missing_file_loads_empty():
    assert not accounts.exists()
    assert accounts.load_accounts() == {}


def test_malformed_lines_are_skipped(data_dir):
    (data_dir / "accounts.txt").write_text("nonsense\nCodeChef=bob|12\nAtCoder=carol|soon\n")
    assert list(accounts.load_accounts()) == ["CodeChef"]


def test_first_setup_stamps_every_platform():
    result = accounts.run_setup(PLATFORMS, prompt=_answers("alice", "", "carol"), now=500)

    assert result["Codeforces"] == PlatformConfig("Codeforces", "alice", 500)
    assert result["CodeChef"] == PlatformConfig("CodeChef", "", 500)
    assert result["AtCoder"] == PlatformConfig("AtCoder", "carol", 500)
    assert accounts.load_accounts() == result


def test_rerun_setup_only_restamps_changed_usernames():
    accounts.run_setup(PLATFORMS, prompt=_answers("alice", "bob", "carol"), now=500)
    result = accounts.run_setup(PLATFORMS, prompt=_answers("", "dave", "-"), now=900)

    assert result["Codeforces"] == PlatformConfig("Codeforces", "alice", 500)
    assert result["CodeChef"] == PlatformConfig("CodeChef", "dave", 900)
    assert result["AtCoder"] == PlatformConfig("AtCoder", "", 900)


def test_setup_rewrites_whole_file(data_dir):
    (data_dir / "accounts.txt").write_text("Codeforces=alice|1\nTopCoder=old|1\n")
    accounts.run_setup(PLATFORMS, prompt=_answers("", "", ""), now=5)

    assert (data_dir / "accounts.txt").read_text().splitlines() == [
        "Codeforces=alice|1",
        "CodeChef=|5",
        "AtCoder=|5",
    ]


def test_clear_accounts(data_dir):
    accounts.save_accounts([PlatformConfig("Codeforces", "alice", 1)])
    accounts.clear_accounts()
    assert accounts.load_accounts() == {}
    assert not accounts.exists()

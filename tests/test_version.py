import pytest

from chatroulette.version import BuildInfo


def test_truncated_commit_sha_is_prefix():
    sha = "0123456789abcdef0123456789abcdef01234567"
    info = BuildInfo(build_date="2024-01-01", commit_sha=sha)
    short = info.truncated_commit_sha()
    assert short == sha[:10]
    assert sha.startswith(short)


def test_truncated_commit_sha_exact_length():
    info = BuildInfo(commit_sha="abcdefabcd")
    assert info.truncated_commit_sha() == "abcdefabcd"


def test_truncated_commit_sha_too_short():
    with pytest.raises(ValueError):
        BuildInfo(commit_sha="abc").truncated_commit_sha()


def test_truncated_commit_sha_empty():
    with pytest.raises(ValueError):
        BuildInfo().truncated_commit_sha()


def test_build_info_keeps_fields():
    info = BuildInfo(build_date="2024-01-01", commit_sha="fedcba9876543210")
    assert info.build_date == "2024-01-01"
    assert len(info.truncated_commit_sha()) == 10
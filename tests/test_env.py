"""Tests for palette_kit.core.env: .env loading and settings resolution."""

import os
from pathlib import Path

import pytest
from palette_kit.core.env import DEFAULT_STATE_PATH, _find_dotenv, _parse_dotenv, load_env, load_settings


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ('PALETTE_TOOL_STATE', 'PALETTE_TOOL_SEED', 'PALETTE_TOOL_OUT_DIR'):
        monkeypatch.delenv(key, raising=False)


class TestParseDotenv:
    def test_key_values(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('PALETTE_TOOL_SEED=7\nPALETTE_TOOL_STATE=/tmp/s.json\n')
        assert _parse_dotenv(f) == {'PALETTE_TOOL_SEED': '7', 'PALETTE_TOOL_STATE': '/tmp/s.json'}

    def test_quotes_comments_and_junk(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('# settings\n\nA="two words"\nB=\'single\'\nNOEQUALS\n')
        assert _parse_dotenv(f) == {'A': 'two words', 'B': 'single'}


class TestFindDotenv:
    def test_finds_in_parent(self, tmp_path: Path) -> None:
        sub = tmp_path / 'sub'
        sub.mkdir()
        dotenv = tmp_path / '.env'
        dotenv.write_text('X=1\n')
        assert _find_dotenv(sub) == dotenv

    def test_stops_at_git(self, tmp_path: Path) -> None:
        repo = tmp_path / 'repo'
        (repo / '.git').mkdir(parents=True)
        (tmp_path / '.env').write_text('X=1\n')
        src = repo / 'src'
        src.mkdir()
        assert _find_dotenv(src) is None

    def test_stops_at_git_file(self, tmp_path: Path) -> None:
        repo = tmp_path / 'repo'
        repo.mkdir()
        (repo / '.git').write_text('gitdir: ../elsewhere\n')
        (tmp_path / '.env').write_text('X=1\n')
        assert _find_dotenv(repo) is None


class TestLoadEnv:
    def test_sets_missing_vars(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        # setenv first so teardown removes whatever load_env sets
        monkeypatch.setenv('PALETTE_TOOL_TEST_KEY', 'placeholder')
        monkeypatch.delenv('PALETTE_TOOL_TEST_KEY')
        (tmp_path / '.env').write_text('PALETTE_TOOL_TEST_KEY=fromfile\n')
        monkeypatch.chdir(tmp_path)
        assert load_env() == tmp_path / '.env'
        assert os.environ.get('PALETTE_TOOL_TEST_KEY') == 'fromfile'

    def test_does_not_overwrite(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('PALETTE_TOOL_TEST_KEY', 'original')
        (tmp_path / '.env').write_text('PALETTE_TOOL_TEST_KEY=fromfile\n')
        monkeypatch.chdir(tmp_path)
        load_env()
        assert os.environ.get('PALETTE_TOOL_TEST_KEY') == 'original'

    def test_explicit_missing_file(self, tmp_path: Path) -> None:
        assert load_env(env_file=str(tmp_path / 'nope.env')) is None

    def test_none_found(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / '.git').mkdir()
        monkeypatch.chdir(tmp_path)
        assert load_env() is None


@pytest.mark.usefixtures('clean_env')
class TestLoadSettings:
    def test_defaults(self):
        settings = load_settings()
        assert settings.state_path == DEFAULT_STATE_PATH
        assert settings.seed is None
        assert settings.out_dir == Path('.')

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv('PALETTE_TOOL_STATE', str(tmp_path / 'state.json'))
        monkeypatch.setenv('PALETTE_TOOL_SEED', '42')
        monkeypatch.setenv('PALETTE_TOOL_OUT_DIR', str(tmp_path / 'out'))
        settings = load_settings()
        assert settings.state_path == tmp_path / 'state.json'
        assert settings.seed == 42
        assert settings.out_dir == tmp_path / 'out'

    def test_arguments_win(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv('PALETTE_TOOL_STATE', str(tmp_path / 'env.json'))
        monkeypatch.setenv('PALETTE_TOOL_SEED', '42')
        settings = load_settings(state_path=str(tmp_path / 'arg.json'), seed=3)
        assert settings.state_path == tmp_path / 'arg.json'
        assert settings.seed == 3

    def test_bad_seed(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('PALETTE_TOOL_SEED', 'lucky')
        with pytest.raises(ValueError, match='PALETTE_TOOL_SEED'):
            load_settings()

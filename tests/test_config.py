"""Tests for configuration loading."""

import logging

from daybook.config import Config, load_config


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_config(tmp_path / "nope.conf") == Config()

    def test_reads_values(self, tmp_path):
        conf = tmp_path / "daybook.conf"
        conf.write_text(
            "# daybook settings\n"
            "JOURNALS_DIR = ~/notes/journals\n"
            'DEFAULT_JOURNAL = "Work" # the usual one\n'
            "OPENER = 'code --wait'\n"
            "PAGE_SIZE = 5\n"
            "EXTENSION = md\n"
        )

        config = load_config(conf)

        assert config.journals_dir == "~/notes/journals"
        assert config.default_journal == "Work"
        assert config.opener == "code --wait"
        assert config.page_size == 5
        assert config.extension == ".md"

    def test_unquoted_inline_comment(self, tmp_path):
        conf = tmp_path / "daybook.conf"
        conf.write_text("DEFAULT_JOURNAL = Personal # comment\n")
        assert load_config(conf).default_journal == "Personal"

    def test_invalid_page_size_ignored(self, tmp_path, caplog):
        conf = tmp_path / "daybook.conf"
        conf.write_text("PAGE_SIZE = lots\nnot a setting\n")

        with caplog.at_level(logging.WARNING):
            config = load_config(conf)

        assert config.page_size == 20
        assert "PAGE_SIZE" in caplog.text

    def test_zero_page_size_ignored(self, tmp_path):
        conf = tmp_path / "daybook.conf"
        conf.write_text("PAGE_SIZE = 0\n")
        assert load_config(conf).page_size == 20

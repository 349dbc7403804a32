"""Unit tests for shellwizard.extract."""

import pytest

from shellwizard.extract import extract_commands, is_shell_tag


class TestIsShellTag:
    @pytest.mark.parametrize("tag", ["", "bash", "sh", "zsh", "BASH", "Sh"])
    def test_shell_tags_are_accepted(self, tag):
        assert is_shell_tag(tag) is True

    @pytest.mark.parametrize("tag", ["python", "json", "console", "fish", "powershell"])
    def test_other_tags_are_rejected(self, tag):
        assert is_shell_tag(tag) is False


class TestExtractCommands:
    def test_no_fences_yields_empty_list(self):
        assert extract_commands("Just use your package manager.") == []

    def test_empty_text_yields_empty_list(self):
        assert extract_commands("") == []

    def test_tagged_and_untagged_blocks_in_order(self):
        text = (
            "List everything:\n"
            "```bash\n"
            "ls -la\n"
            "```\n"
            "Then say hello:\n"
            "```\n"
            "echo hi\n"
            "```\n"
        )
        assert extract_commands(text) == ["ls -la", "echo hi"]

    def test_sh_and_zsh_tags_are_extracted(self):
        text = "```sh\nuname -a\n```\n\n```zsh\nsetopt\n```"
        assert extract_commands(text) == ["uname -a", "setopt"]

    def test_non_shell_block_is_skipped(self):
        text = "```python\nimport os\nos.system('ls')\n```"
        assert extract_commands(text) == []

    def test_non_shell_block_looking_like_shell_is_skipped(self):
        text = "```console\nrm -rf build\n```"
        assert extract_commands(text) == []

    def test_text_between_non_shell_and_shell_blocks_is_not_captured(self):
        text = (
            "```python\n"
            "print('hi')\n"
            "```\n"
            "Some prose in between.\n"
            "```bash\n"
            "ls\n"
            "```\n"
        )
        assert extract_commands(text) == ["ls"]

    def test_multiline_block_is_a_single_candidate(self):
        text = "```bash\ncd /tmp\nls | grep foo > out.txt\n```"
        assert extract_commands(text) == ["cd /tmp\nls | grep foo > out.txt"]

    def test_surrounding_whitespace_is_trimmed(self):
        text = "```bash\n\n   git status   \n\n```"
        assert extract_commands(text) == ["git status"]

    def test_tag_only_block_is_discarded(self):
        text = "```bash\n```\n```sh\nwhoami\n```"
        assert extract_commands(text) == ["whoami"]

    def test_whitespace_only_block_is_discarded(self):
        assert extract_commands("```\n   \n\n```") == []

    def test_unclosed_fence_produces_no_match(self):
        text = "```bash\nls -la\nno closing marker here"
        assert extract_commands(text) == []

    def test_closed_block_before_unclosed_one_is_kept(self):
        text = "```bash\npwd\n```\n\n```bash\nls -la\n"
        assert extract_commands(text) == ["pwd"]

    def test_separate_blocks_are_not_merged(self):
        text = "```bash\none\n```\nmiddle\n```bash\ntwo\n```"
        commands = extract_commands(text)
        assert commands == ["one", "two"]
        assert all("middle" not in c for c in commands)

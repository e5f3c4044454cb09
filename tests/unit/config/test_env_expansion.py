"""Tests for environment variable expansion utilities."""

import os
from unittest.mock import patch

from cloudstack.config.utils.env_expansion import expand_config_env_vars, expand_env_vars


class TestEnvironmentVariableExpansion:
    """Test environment variable expansion functionality."""

    def test_expand_simple_env_var(self):
        """Test expansion of simple environment variable."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            result = expand_env_vars("$TEST_VAR")
            assert result == "/test/path"

    def test_expand_braced_env_var_with_subpath(self):
        """Test expansion of braced environment variable with subpath."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            result = expand_env_vars("${TEST_VAR}/subdir")
            assert result == "/test/path/subdir"

    def test_expand_nonexistent_env_var(self):
        """Test that an unset variable is left as written."""
        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop("CLOUDSTACK_NONEXISTENT_VAR", None)
            assert expand_env_vars("$CLOUDSTACK_NONEXISTENT_VAR") == "$CLOUDSTACK_NONEXISTENT_VAR"
            assert expand_env_vars("${CLOUDSTACK_NONEXISTENT_VAR}") == "${CLOUDSTACK_NONEXISTENT_VAR}"

    def test_expand_default_for_unset_var(self):
        """Test that ${VAR:default} falls back to the default."""
        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop("CLOUDSTACK_LOG_DIR", None)
            assert expand_env_vars("${CLOUDSTACK_LOG_DIR:/var/log}/cs.log") == "/var/log/cs.log"

    def test_set_var_wins_over_default(self):
        """Test that a set variable is used instead of the default."""
        with patch.dict(os.environ, {"CLOUDSTACK_LOG_DIR": "/tmp/cs"}):
            assert expand_env_vars("${CLOUDSTACK_LOG_DIR:/var/log}/cs.log") == "/tmp/cs/cs.log"

    def test_expand_nested_dict_and_list_values(self):
        """Test expansion inside nested dictionaries and lists."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            config = {
                "logging": {"file": {"path": "$TEST_VAR/cs.log"}},
                "paths": ["$TEST_VAR/a", "plain"],
            }
            result = expand_env_vars(config)
            assert result == {
                "logging": {"file": {"path": "/test/path/cs.log"}},
                "paths": ["/test/path/a", "plain"],
            }

    def test_expand_non_string_values(self):
        """Test that non-string values are returned unchanged."""
        config = {"number": 42, "boolean": True, "none": None}
        result = expand_env_vars(config)
        assert result == config

    def test_expand_config_env_vars(self):
        """Test the main configuration expansion function."""
        with patch.dict(os.environ, {"CS_HOME": "/opt/cloudstack"}):
            config = {
                "logging": {"level": "INFO", "file": {"path": "$CS_HOME/logs/cs.log"}},
                "parser": {"strict_envelopes": True},
            }
            result = expand_config_env_vars(config)
            assert result["logging"]["file"]["path"] == "/opt/cloudstack/logs/cs.log"
            assert result["parser"]["strict_envelopes"] is True

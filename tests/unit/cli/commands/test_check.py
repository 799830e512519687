"""Unit tests for the check-setup command."""

from estimator.cli import cli


class TestCheckSetupCommand:
    """Test suite for the check-setup command."""

    def test_warnings_only(self, runner, write_json, sample_profile_data):
        """Test a profile with warnings passes with exit code 0."""
        result = runner.invoke(
            cli, ["check-setup", write_json("profile.json", sample_profile_data)]
        )

        assert result.exit_code == 0
        assert "tax_rules.enabled: Taxes are disabled" in result.output
        assert "Setup check completed: 1 warning(s)" in result.output

    def test_clean_profile(self, runner, write_json, sample_profile_data):
        data = dict(sample_profile_data, tax_rules={"enabled": True})
        result = runner.invoke(cli, ["check-setup", write_json("profile.json", data)])

        assert result.exit_code == 0
        assert "Setup check passed" in result.output

    def test_errors_exit_with_code_1(self, runner, write_json, sample_profile_data):
        """Test a crew member without a usable rate fails the check."""
        data = dict(
            sample_profile_data,
            crew=[{"name": "Alex", "employment_type": "salary"}],
        )
        result = runner.invoke(cli, ["check-setup", write_json("profile.json", data)])

        assert result.exit_code == 1
        assert "crew[0]" in result.output
        assert "worker=Alex" in result.output
        assert "Setup check failed: 1 error(s), 1 warning(s)" in result.output

    def test_severity_filter(self, runner, write_json, sample_profile_data):
        """Test --severity error hides warnings."""
        result = runner.invoke(
            cli,
            [
                "check-setup",
                write_json("profile.json", sample_profile_data),
                "--severity",
                "error",
            ],
        )

        assert result.exit_code == 0
        assert "tax_rules.enabled" not in result.output

    def test_severity_info_shows_saturated_margin(self, runner, write_json):
        data = {
            "pricing_strategy": {"mode": "margin", "target_gross_margin_percent": 100}
        }
        result = runner.invoke(
            cli,
            ["check-setup", write_json("profile.json", data), "--severity", "info"],
        )

        assert result.exit_code == 0
        assert "pricing_strategy.target_gross_margin_percent" in result.output

    def test_invalid_json(self, runner, tmp_path):
        path = tmp_path / "profile.json"
        path.write_text("{not json", encoding="utf-8")

        result = runner.invoke(cli, ["check-setup", str(path)])

        assert result.exit_code == 3
        assert "invalid JSON" in result.output

    def test_uses_environment_labor_defaults(
        self, runner, write_json, sample_profile_data, monkeypatch
    ):
        """Test a profile without a labor section is checked against the settings."""
        monkeypatch.setenv("DEFAULT_BURDEN_PERCENT", "0")
        data = {k: v for k, v in sample_profile_data.items() if k != "labor"}
        result = runner.invoke(cli, ["check-setup", write_json("profile.json", data)])

        assert result.exit_code == 0
        assert "labor.burden_percent_default: Default labor burden is not set" in (
            result.output
        )
        assert "Setup check completed: 2 warning(s)" in result.output

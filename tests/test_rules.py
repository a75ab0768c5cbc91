"""Tests for ordered rule evaluation."""

import logging

from fieldknobs.rules import Rule, evaluate_rules


class TestEvaluateRules:
    """Test evaluate_rules."""

    def test_all_rules_pass(self):
        """Test that no failure is reported when every rule passes."""
        rules = [
            Rule("first", lambda: False, "first failed"),
            Rule("second", lambda: False, "second failed"),
        ]
        assert evaluate_rules(rules) is None

    def test_empty_rules(self):
        """Test that an empty rule list passes."""
        assert evaluate_rules([]) is None

    def test_first_failure_wins(self):
        """Test that the earliest violated rule is reported."""
        rules = [
            Rule("first", lambda: False, "first failed"),
            Rule("second", lambda: True, "second failed"),
            Rule("third", lambda: True, "third failed"),
        ]
        failed = evaluate_rules(rules)
        assert failed is rules[1]
        assert failed.message == "second failed"

    def test_short_circuits(self):
        """Test that rules after the first failure are never evaluated."""
        calls = []

        def condition(name, violated):
            def check():
                calls.append(name)
                return violated
            return check

        rules = [
            Rule("a", condition("a", False), "a"),
            Rule("b", condition("b", True), "b"),
            Rule("c", condition("c", True), "c"),
        ]
        evaluate_rules(rules)
        assert calls == ["a", "b"]

    def test_truthy_condition_counts_as_violation(self):
        """Test that non-bool truthy conditions are treated as violations."""
        rule = Rule("found", lambda: "!", "contains '!'")
        assert rule.is_violated() is True
        assert evaluate_rules([rule]) is rule

    def test_failure_logged_at_debug(self, caplog):
        """Test that the failing rule is logged."""
        with caplog.at_level(logging.DEBUG, logger="fieldknobs.rules"):
            evaluate_rules([Rule("min_value", lambda: True, "too small")])
        assert "min_value" in caplog.text

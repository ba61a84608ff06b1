"""Testing helpers – Hypothesis strategies for Optionals."""

"""
Tests for the AI app.

This package contains tests for:
- Pip heuristics and the expectimax search
- Player implementations
- Match runner
- Management commands
"""

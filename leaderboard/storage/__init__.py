"""Leaderboard backends."""

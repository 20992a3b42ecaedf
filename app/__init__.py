"""Bookwright backend: player-written books, engagement ledgers and leaderboards."""

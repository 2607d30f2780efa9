"""
Recommendation engine.

Responsibilities:
- Rank genres by how often they appear among a user's favorites.
- Score unfavorited catalog items on genre affinity, rating and recency.
- Provide the simpler rating-ordered variant used by the id-only endpoint.
"""

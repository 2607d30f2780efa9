"""
External documentary metadata.

Responsibilities:
- Manage IMDb API configuration and credentials.
- Fetch documentary search results and convert them to catalog items.
- Fall back to a fixed documentary list when the source is unavailable.
"""

"""HTTP surface for the advisor."""

"""HTTP surface of the herd monitor."""

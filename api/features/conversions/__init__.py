"""Conversions feature package: saving conversion records and paging through them."""

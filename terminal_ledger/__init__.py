"""Seat booking, trip vouchers and revenue for a single transport terminal."""

"""Hoops: collects user-submitted hoop locations and files them locally or in a spreadsheet."""

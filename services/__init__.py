"""Service layer for club listings, filtering, pagination and favorites."""

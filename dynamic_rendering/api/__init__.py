"""Web framework integration for dynamic rendering."""

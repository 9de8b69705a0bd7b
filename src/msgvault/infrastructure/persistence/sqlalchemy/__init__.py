"""SQLAlchemy persistence for stored messages."""

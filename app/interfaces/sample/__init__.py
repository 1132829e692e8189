"""Sample bounded context — HTTP interface."""

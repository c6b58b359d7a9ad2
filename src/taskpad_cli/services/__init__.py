"""Services module for Taskpad CLI - Business logic layer."""

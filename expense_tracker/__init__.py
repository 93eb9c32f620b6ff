"""Command-line front end for the in-memory expense tracker."""

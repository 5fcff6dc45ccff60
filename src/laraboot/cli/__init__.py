"""laraboot command line interface."""

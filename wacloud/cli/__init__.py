"""wacloud command-line interface."""

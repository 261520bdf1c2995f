"""`optparser` command line: print demo help, show a schema's help, parse argv against a schema."""

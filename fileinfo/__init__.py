"""fileinfo: inspect files from the command line."""

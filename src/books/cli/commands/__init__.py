# ABOUTME: One module per books subcommand; each is registered on the root group in books.cli.

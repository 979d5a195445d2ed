"""Runtime plumbing shared by the CLI and the scaffolder."""

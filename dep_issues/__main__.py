from dep_issues.cli import cli

cli(prog_name="dep-issues")

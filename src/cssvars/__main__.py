from cssvars.cli.main import cli

cli()

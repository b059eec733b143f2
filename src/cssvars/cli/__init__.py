from cssvars.cli.main import cli

__all__ = ["cli"]

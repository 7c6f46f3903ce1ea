"""
Entry point for the `pkgdist` command-line interface.

pkgdist builds the release npm packages with Bazel and copies them into a
dist directory laid out the way the legacy build script produced it.
"""


def main():
    """Main entry point for the pkgdist CLI."""
    from .cli import cli

    cli()


if __name__ == "__main__":
    main()

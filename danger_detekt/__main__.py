from danger_detekt.cli import cli

if __name__ == "__main__":
    cli()

import argparse
import sys

from config import DatabaseSettings
from console import Console
from database import Database, DatabaseConnectionError, StatementError
from network_system import NetworkSystem


def build_parser():
    parser = argparse.ArgumentParser(
        prog="profnetwork", description="Professional network console client"
    )
    parser.add_argument("dbname", help="database name")
    parser.add_argument("port", help="database port")
    parser.add_argument("user", help="database user")
    parser.add_argument("--host", default=None, help="database host (default: localhost)")
    parser.add_argument("--create-tables", action="store_true",
                        help="create the tables if they do not exist yet")
    return parser


def greeting(console):
    console.show(
        "\n\n*******************************************************\n"
        "              User Interface                           \n"
        "*******************************************************\n"
    )


def main(argv=None, console=None, connect=Database.open):
    """Main application entry point; returns the process exit code"""
    args = build_parser().parse_args(argv)
    settings = DatabaseSettings.from_args(args)
    console = console or Console(color=sys.stdout.isatty())

    greeting(console)
    try:
        db = connect(settings.host, settings.port, settings.name, settings.user,
                     settings.password, out=console.stdout)
    except DatabaseConnectionError as e:
        console.error(f"Error - Unable to Connect to Database: {e}")
        console.show("Make sure you started postgres on this machine")
        return 1

    try:
        if args.create_tables:
            db.create_tables()
        NetworkSystem(db, console).run()  # returns on Exit
    except EOFError:
        pass  # input closed: same as Exit
    except StatementError as e:
        console.error(str(e))
        return 1
    finally:
        console.show("Disconnecting from database...", end="")
        db.close()
        console.show("Done\n\nBye !")
    return 0


def run():
    sys.exit(main())


# Ensure main() only runs if this script is executed directly
if __name__ == "__main__":
    run()

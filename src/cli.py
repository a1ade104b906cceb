import typer

from commands.sync import sync

app = typer.Typer(help="j2funds 先物手口 자동 크롤링 CLI")

app.command()(sync)

if __name__ == "__main__":
    app()

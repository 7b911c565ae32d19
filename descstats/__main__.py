from descstats.cli import app


app(prog_name="descstats")

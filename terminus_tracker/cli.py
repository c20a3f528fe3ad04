import click
import requests
from pathlib import Path

from terminus_tracker.config import Config
from terminus_tracker.errors import ConfigurationError, TrackerError
from terminus_tracker.logger import get_logger
from terminus_tracker.services.sync import SyncService


@click.group()
@click.pass_context
def cli(ctx):
    """Keep a snapshot of Strava activities that mention the Terminus keyword."""
    ctx.ensure_object(dict)
    ctx.obj['logger'] = get_logger('terminus_tracker')


@cli.command()
@click.option('--output', type=click.Path(dir_okay=False), help='Snapshot path (default: static/activities.json)')
@click.option('--keyword', default=None, help='Keyword to match in name or description')
@click.pass_context
def fetch(ctx, output, keyword):
    """Fetch activities and write the filtered snapshot."""
    logger = ctx.obj['logger']
    output_path = Path(output) if output else Config.SNAPSHOT_PATH

    service = SyncService()
    try:
        result = service.run(output_path=output_path, keyword=keyword)
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        click.echo("Set STRAVA_CLIENT_ID, STRAVA_CLIENT_SECRET and STRAVA_REFRESH_TOKEN", err=True)
        raise click.Abort()
    except TrackerError as e:
        logger.error(f"Error: {e}")
        raise click.Abort()
    except requests.RequestException as e:
        logger.error(f"Request to Strava failed: {e}")
        raise click.Abort()
    except (KeyError, ValueError) as e:
        logger.error(f"Unexpected response from Strava: {e!r}")
        raise click.Abort()

    logger.info(
        f"Fetch complete: {result['matched']} of {result['total']} activities saved to {result['path']}"
    )


@cli.command()
@click.option('--host', default=Config.WEB_HOST, help='Host to bind to')
@click.option('--port', default=Config.WEB_PORT, help='Port to bind to')
def web(host, port):
    """Start the web UI."""
    from terminus_tracker.web.app import create_app
    app = create_app()
    click.echo(f"Starting web server at http://{host}:{port}")
    app.run(host=host, port=port, debug=False)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == '__main__':
    main()

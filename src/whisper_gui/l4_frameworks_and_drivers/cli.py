"""CLI entry point for whisper-gui."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from whisper_gui import __version__
from whisper_gui.l1_entities.media import SUPPORTED_EXTENSIONS, is_supported_media
from whisper_gui.l1_entities.output_format import OutputFormat


def _resolve_log_dir(configured: str | None) -> Path:
    if configured:
        return Path(configured)
    from whisper_gui.l3_interface_adapters.gateways.paths import LOG_DIR  # noqa: PLC0415 -- deferred: platformdirs not loaded on --help

    return LOG_DIR


@click.command()
@click.argument(
    'media',
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    '-c',
    '--config',
    'config_path',
    default=None,
    type=click.Path(exists=True),
    help='Path to YAML config file.',
)
@click.option(
    '-m',
    '--model',
    'model_id',
    default=None,
    help="Whisper model id (e.g. 'openai_whisper-small'). Saved as the new default.",
)
@click.option(
    '-f',
    '--format',
    'output_format',
    default=None,
    type=click.Choice([fmt.value for fmt in OutputFormat]),
    help='Output format. Saved as the new default.',
)
@click.option(
    '-e',
    '--export',
    'export_path',
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Transcribe MEDIA and write the result to this path (no TUI).',
)
@click.version_option(version=__version__)
def cli(media, config_path, model_id, output_format, export_path):
    """whisper-gui -- transcribe audio/video and export plain text, SRT, WebVTT, or JSON."""
    from whisper_gui.l3_interface_adapters.gateways.yaml_config_loader import (  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help
        YamlConfigLoader,
    )
    from whisper_gui.l4_frameworks_and_drivers.config import (  # noqa: PLC0415 -- deferred: not needed for --help
        build_app_config,
    )
    from whisper_gui.l4_frameworks_and_drivers.logging_setup import (  # noqa: PLC0415 -- deferred: not needed for --help
        setup_file_logging,
    )

    if media is not None and not is_supported_media(media):
        allowed = ', '.join(sorted(SUPPORTED_EXTENSIONS))
        click.echo(f'Error: unsupported media file {media.name} (expected one of: {allowed})', err=True)
        sys.exit(1)
    if export_path is not None and media is None:
        click.echo('Error: --export requires a MEDIA file', err=True)
        sys.exit(1)

    try:
        raw = YamlConfigLoader().load_raw(config_path)
        config = build_app_config(raw)
    except (FileNotFoundError, ValueError) as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)

    setup_file_logging(_resolve_log_dir(config.logging.directory))

    from whisper_gui.l4_frameworks_and_drivers.container import (  # noqa: PLC0415 -- deferred: engine and audio stack not loaded on --help
        DependencyContainer,
    )

    container = DependencyContainer(config)
    controller = container.controller
    if model_id:
        controller.set_selected_model(model_id)
    if output_format:
        controller.change_output_format(OutputFormat(output_format))

    if export_path is not None:
        from whisper_gui.l4_frameworks_and_drivers.batch_runner import (  # noqa: PLC0415 -- deferred: batch mode only, not loaded for TUI path
            run_batch,
        )

        sys.exit(run_batch(controller, media, export_path))

    from whisper_gui.l4_frameworks_and_drivers.app import (  # noqa: PLC0415 -- deferred: Textual TUI not loaded for --help or batch mode
        WhisperApp,
    )

    app = WhisperApp(config=config, controller=controller, initial_file=media)
    app.run()

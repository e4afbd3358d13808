"""Generate secrets command."""

import logging
from collections.abc import Iterator

from ..StageResult import StageResult
from . import SecretsGenerateOutput
from .generate_hex_secret import generate_hex_secret

logger = logging.getLogger(__name__)

PRIMARY_NAME = "JWT_SECRET"
PRIMARY_BYTES = 32
SECONDARY_NAME = "RANDOM_SECRET"
SECONDARY_BYTES = 16

DASHBOARD_INSTRUCTIONS = [
    "Go to Vercel Dashboard → Your Project → Settings → Environment Variables",
    f"Add {PRIMARY_NAME} with the value above",
    'Make sure to set scope to "Production, Preview, Development"',
    "Redeploy your project",
]
REMINDER = "Keep these secrets secure and never commit them to your repository!"


def cmd_generate() -> StageResult:
    """Generate a primary (32-byte) and secondary (16-byte) hex secret.

    Returns:
        StageResult with both secrets and the dashboard instructions
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result."""
        yield (0.3, f"Generating {PRIMARY_NAME}...")
        try:
            primary = generate_hex_secret(PRIMARY_BYTES)
            yield (0.6, f"Generating {SECONDARY_NAME}...")
            secondary = generate_hex_secret(SECONDARY_BYTES)
        except (OSError, NotImplementedError) as e:
            logger.info(f"Secure random source unavailable: {e}")
            yield (1.0, "Complete")
            result_obj.result = f"Secure random source unavailable: {e}"
            result_obj.output = SecretsGenerateOutput(
                errors=[str(e)],
                warnings=[],
                primary_name=PRIMARY_NAME,
                primary="",
                secondary_name=SECONDARY_NAME,
                secondary="",
                instructions=[],
                reminder="",
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = "Generated 2 secret(s)"
        result_obj.output = SecretsGenerateOutput(
            errors=[],
            warnings=[],
            primary_name=PRIMARY_NAME,
            primary=primary,
            secondary_name=SECONDARY_NAME,
            secondary=secondary,
            instructions=list(DASHBOARD_INSTRUCTIONS),
            reminder=REMINDER,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Generating secure secrets for your application...",
        progress_callback=do_work,
    )

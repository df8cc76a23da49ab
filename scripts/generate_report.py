"""Invoke the report function locally against the configured bucket.

Usage:
    PYTHONPATH=src python scripts/generate_report.py 2024-01-01 2024-01-31

Uses the default AWS credential chain; OUTPUT_BUCKET / AWS_REGION can be set
in the environment or in .env.
"""

import json
import logging
import sys

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)-5s %(name)s - %(message)s")
logger = logging.getLogger("generate_report")

# Suppress noisy loggers
logging.getLogger("botocore").setLevel(logging.WARNING)
logging.getLogger("boto3").setLevel(logging.WARNING)
logging.getLogger("urllib3").setLevel(logging.WARNING)


def main() -> int:
    from salesreport.config import settings
    from salesreport.lambda_function import lambda_handler

    if len(sys.argv) != 3:
        print(__doc__)
        return 2

    event = {"StartDate": sys.argv[1], "EndDate": sys.argv[2]}
    logger.info("Bucket: %s  Region: %s", settings.output_bucket, settings.aws_region or "(default chain)")

    try:
        result = lambda_handler(event, None)
    except Exception:
        logger.exception("Invocation failed")
        return 1

    print(json.dumps(result, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())

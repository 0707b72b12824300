"""
JPEG Metadata Extractor Lambda Function.

Extracts embedded metadata (TIFF/EXIF, GPS, IPTC, XMP, thumbnail) from JPEG
files stored in S3 and returns it per asset.
"""

import asyncio
import json
import os
from typing import Any, Dict, List, Optional, Tuple

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

from .core import parse
from .formatting import to_json_safe

# ── config ─────────────────────────────────────────────────────────
logger = Logger(service="jpegmeta")

EXTRACT_XMP = os.environ.get("JPEGMETA_EXTRACT_XMP", "true").lower() == "true"


def extract_s3_location(asset: dict) -> Optional[Tuple[str, str]]:
    """
    Extract S3 bucket and key from asset structure.

    Reads DigitalSourceAsset.MainRepresentation.StorageInfo.PrimaryLocation.

    Returns:
        Tuple of (bucket, key) or None if location is invalid or missing

    Examples:
        >>> extract_s3_location({})
        None
    """
    try:
        location = asset["DigitalSourceAsset"]["MainRepresentation"]["StorageInfo"][
            "PrimaryLocation"
        ]
        bucket = location.get("Bucket")
        key = (location.get("ObjectKey") or {}).get("FullPath")
    except (KeyError, AttributeError, TypeError):
        return None

    if not bucket or not key:
        return None
    return (bucket, key)


async def process_assets_async(assets: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Process assets asynchronously.

    Args:
        assets: List of asset dictionaries

    Returns:
        List of result dictionaries
    """
    results: List[Dict[str, Any]] = []
    options = {"xmp": EXTRACT_XMP}

    for asset in assets:
        inventory_id = asset.get("InventoryID")

        if not inventory_id:
            logger.warning("Skipping asset without InventoryID", extra={"asset": asset})
            continue

        location = extract_s3_location(asset)
        if not location:
            logger.error(
                f"Skipping asset {inventory_id} with missing S3 location",
                extra={"asset": asset},
            )
            results.append(
                {
                    "inventoryId": inventory_id,
                    "status": "ERROR",
                    "message": "Missing S3 location",
                }
            )
            continue

        bucket, key = location
        logger.info(
            f"Processing asset {inventory_id}", extra={"bucket": bucket, "key": key}
        )

        try:
            metadata = await parse(f"s3://{bucket}/{key}", options)
        except Exception as e:
            logger.error(
                f"Error processing asset {inventory_id}: {str(e)}",
                extra={"error": str(e), "inventory_id": inventory_id},
            )
            results.append(
                {"inventoryId": inventory_id, "status": "ERROR", "message": str(e)}
            )
            continue

        if metadata.errors:
            logger.warning(
                f"Decoded asset {inventory_id} with errors",
                extra={"errors": metadata.errors},
            )

        results.append(
            {
                "inventoryId": inventory_id,
                "status": "OK",
                "metadata": to_json_safe(metadata),
            }
        )
        logger.info(f"Successfully processed asset {inventory_id}")

    return results


# ── handler ────────────────────────────────────────────────────────
@logger.inject_lambda_context
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Extract JPEG metadata for multiple assets.

    Args:
        event: Lambda event containing payload.assets array
        context: Lambda context

    Returns:
        dict: Response with statusCode and results array
    """
    logger.info("Received event", extra={"event": event})

    assets = event.get("payload", {}).get("assets", [])

    if not assets:
        logger.warning("No assets found in event.payload.assets")
        return {
            "statusCode": 200,
            "body": json.dumps({"message": "No assets to process", "results": []}),
        }

    logger.info(f"Processing {len(assets)} assets")

    results = asyncio.run(process_assets_async(assets))

    return {
        "statusCode": 200,
        "body": json.dumps(
            {
                "message": f"Processed {len(results)} assets",
                "results": results,
            }
        ),
    }

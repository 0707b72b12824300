"""
Input reader

Acquires the whole file as bytes; decoding always runs on a fully resident
buffer.
"""

import asyncio
import base64
from pathlib import Path
from urllib.parse import urlparse

import boto3
import requests
from aws_lambda_powertools import Logger

from .util.buffer_view import BufferView

logger = Logger(service="jpegmeta", child=True)

INVALID_INPUT = "Invalid input argument"
REQUEST_TIMEOUT = 30


async def read(arg):
    """
    Read input and return a BufferView

    Args:
        arg: bytes, memoryview, Path, path string, file-like object,
            data URI, http(s) URL or s3://bucket/key

    Returns:
        BufferView
    """
    if isinstance(arg, BufferView):
        return arg
    elif isinstance(arg, (bytes, bytearray, memoryview)):
        return BufferView(arg)
    elif isinstance(arg, Path):
        return BufferView(await read_path(arg))
    elif isinstance(arg, str):
        return BufferView(await read_string(arg))
    elif hasattr(arg, "read"):
        return BufferView(read_file_like(arg))
    else:
        raise TypeError(f"{INVALID_INPUT}: {type(arg).__name__}")


async def read_string(arg):
    """Dispatch a string on its scheme (data, http(s), s3) or treat it as a path"""
    if arg.startswith("data:"):
        return read_data_uri(arg)
    scheme = urlparse(arg).scheme
    if scheme in ("http", "https"):
        return await fetch_url_as_bytes(arg)
    if scheme == "s3":
        parsed = urlparse(arg)
        return await download_from_s3(parsed.netloc, parsed.path.lstrip("/"))
    return await read_path(Path(arg))


async def read_path(path):
    return await asyncio.to_thread(Path(path).read_bytes)


def read_file_like(file_obj):
    data = file_obj.read()
    if isinstance(data, str):
        data = data.encode("latin-1")
    return data


def read_data_uri(data_url):
    """Decode a base64 data URI"""
    header, _, encoded = data_url.partition(",")
    if ";base64" not in header:
        raise ValueError(f"{INVALID_INPUT}: only base64 data URIs are supported")
    return base64.b64decode(encoded)


async def fetch_url_as_bytes(url):
    """Fetch URL and return bytes"""

    def _get():
        response = requests.get(url, timeout=REQUEST_TIMEOUT)
        response.raise_for_status()
        return response.content

    logger.debug("Fetching URL", extra={"url": url})
    return await asyncio.to_thread(_get)


async def download_from_s3(bucket, key):
    """Download an S3 object into memory"""

    def _get():
        s3_client = boto3.client("s3")
        response = s3_client.get_object(Bucket=bucket, Key=key)
        return response["Body"].read()

    logger.debug("Downloading file from S3", extra={"bucket": bucket, "key": key})
    data = await asyncio.to_thread(_get)
    logger.debug("Downloaded file from S3", extra={"size": len(data)})
    return data

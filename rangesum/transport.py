"""
Blocking HTTP boundary: one GET for the input, one POST for the answers.
No retries are attempted here; callers that want them wrap these calls.
"""
import json
import logging
import urllib.error
import urllib.request

from rangesum.errors import MalformedInput, TransportFailure

logger = logging.getLogger(__name__)

USER_AGENT = "rangesum/0.1"


def _status(response):
    return getattr(response, "status", None) or response.getcode()


def _open(request, timeout):
    url = request.full_url
    try:
        response = urllib.request.urlopen(request, timeout=timeout)
    except urllib.error.HTTPError as exc:
        raise TransportFailure(url, f"HTTP {exc.code}", status=exc.code) from exc
    except (urllib.error.URLError, OSError) as exc:
        raise TransportFailure(url, f"request failed ({exc})") from exc
    except ValueError as exc:
        # http.client rejects header values containing line breaks
        raise TransportFailure(url, f"invalid request ({exc})") from exc
    return response


def fetch_input(url, timeout):
    """
    GET the input object from url and return it decoded.

    Raises TransportFailure on network errors or a non 2xx status and
    MalformedInput when the body is not JSON.
    """
    request = urllib.request.Request(
        url,
        headers={"Accept": "application/json", "User-Agent": USER_AGENT},
        method="GET",
    )
    logger.info("Fetching input from %s", url)
    with _open(request, timeout) as response:
        status = _status(response)
        if not 200 <= status < 300:
            raise TransportFailure(url, f"HTTP {status}", status=status)
        body = response.read()

    try:
        obj = json.loads(body)
    except ValueError as exc:
        raise MalformedInput(f"input from {url} is not valid JSON") from exc
    logger.debug("Received %d bytes from %s", len(body), url)
    return obj


def encode_results(results):
    return json.dumps(list(results), separators=(",", ":")).encode("utf-8")


def deliver(url, token, results, timeout):
    """POST the answers to url with the bearer token, returning the status."""
    body = encode_results(results)
    request = urllib.request.Request(
        url,
        data=body,
        headers={
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
        },
        method="POST",
    )
    logger.info(
        "Delivering %d results to %s (token of %d chars)", len(results), url, len(token)
    )
    with _open(request, timeout) as response:
        status = _status(response)
        if not 200 <= status < 300:
            raise TransportFailure(url, f"HTTP {status}", status=status)
    logger.info("Delivery accepted with HTTP %d", status)
    return status

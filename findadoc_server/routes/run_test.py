"""Run-test endpoints - execute a search and return its relevance report"""

import asyncio
import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

from flask import Blueprint, current_app, jsonify, request

from findadoc_core.driver import SearchDriver
from findadoc_core.errors import InvalidSpecialtyError, SessionBusyError, error_response
from findadoc_core.models import SearchResult, SpecialtyConfig
from findadoc_core.progress import ProgressReporter
from findadoc_core.specialties import resolve

logger = logging.getLogger(__name__)

run_test_bp = Blueprint('run_test', __name__)


def run_async(coro):
    """Run async coroutine in a fresh event loop"""
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()
        asyncio.set_event_loop(None)


def _request_body() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    if data is None:
        data = request.form.to_dict()
    if not isinstance(data, dict):
        raise InvalidSpecialtyError("Request body must be a JSON object")
    return data


def _parse_request(data: Dict[str, Any]) -> Tuple[SpecialtyConfig, str]:
    zip_code = str(data.get('zipCode') or '').strip()
    spec = resolve(data.get('specialty'), data.get('customTerms'))
    return spec, zip_code


def _run_search(spec: SpecialtyConfig, zip_code: str, progress: Optional[ProgressReporter] = None) -> SearchResult:
    settings = current_app.extensions['findadoc']
    driver = SearchDriver(
        cfg=settings['config'],
        launcher=settings['launcher'],
        progress=progress,
    )
    return run_async(driver.run(spec, zip_code))


def _response(spec: SpecialtyConfig, zip_code: str, result: SearchResult) -> Dict[str, Any]:
    return {
        "success": True,
        "specialty": spec.name,
        "description": spec.description,
        "zipCode": zip_code,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "results": result.to_dict(),
    }


@run_test_bp.route('/api/runTest', methods=['POST'])
def run_test():
    """Run a search and report result relevance"""
    try:
        spec, zip_code = _parse_request(_request_body())
        result = _run_search(spec, zip_code)
    except Exception as e:
        logger.error(f"Error running test: {e}")
        payload, status = error_response(e)
        return jsonify(payload), status
    return jsonify(_response(spec, zip_code, result))


@run_test_bp.route('/api/runTestWithProgress', methods=['POST'])
def run_test_with_progress():
    """
    Run a search while streaming progress to /api/runTest/progress/<sessionId>.

    The response only arrives once the run is over, so a listener must
    subscribe with a `sessionId` it chose itself before posting. An id is
    allocated when none is given, but nobody can listen to it. A `sessionId`
    that already has a run in flight is rejected with 409.
    """
    settings = current_app.extensions['findadoc']
    channel = settings['channel']
    try:
        data = _request_body()
    except InvalidSpecialtyError as e:
        payload, status = error_response(e)
        return jsonify(payload), status

    session_id = str(data.get('sessionId') or '') or uuid.uuid4().hex
    if not channel.start(session_id):
        payload, status = error_response(SessionBusyError(session_id))
        payload["sessionId"] = session_id
        return jsonify(payload), status
    reporter = channel.reporter(session_id, settings['config'].total_steps)

    try:
        spec, zip_code = _parse_request(data)
        result = _run_search(spec, zip_code, progress=reporter)
    except Exception as e:
        logger.error(f"Error running test for session {session_id}: {e}")
        if reporter.current_step == 0:
            reporter.fail(f"Error: {e}")
        payload, status = error_response(e)
        payload["sessionId"] = session_id
        return jsonify(payload), status
    finally:
        channel.close(session_id)

    body = _response(spec, zip_code, result)
    body["sessionId"] = session_id
    return jsonify(body)

"""Progress stream endpoint (server-sent events)"""

import json

from flask import Blueprint, Response, current_app

from findadoc_core.progress import KEEPALIVE

progress_bp = Blueprint('progress', __name__)


@progress_bp.route('/api/runTest/progress/<session_id>', methods=['GET'])
def progress_stream(session_id):
    """Stream ProgressEvents for one session until it completes or fails"""
    settings = current_app.extensions['findadoc']
    channel = settings['channel']
    keepalive = settings['config'].progress_keepalive_s
    q = channel.subscribe(session_id)

    def generate():
        """Generator for SSE streaming"""
        for item in channel.listen(session_id, q, keepalive=keepalive):
            if item == KEEPALIVE:
                yield ": keepalive\n\n"
                continue
            yield f"data: {json.dumps(item.to_dict())}\n\n"

    return Response(
        generate(),
        mimetype='text/event-stream',
        headers={
            'Cache-Control': 'no-cache',
            'X-Accel-Buffering': 'no',
        }
    )


from concurrent.futures import Executor, ThreadPoolExecutor
from dataclasses import dataclass

from flask import Flask, current_app, render_template_string, jsonify, request, Response, stream_with_context
from loguru import logger
from werkzeug.exceptions import RequestEntityTooLarge
from werkzeug.utils import secure_filename

from imageground.catalog import load_catalog
from imageground.config import Settings
from imageground.errors import NotFoundError, RemoteError, ValidationError
from imageground.logging import init_logging
from imageground.media import GRID_RESOLUTION, CloudMediaService
from imageground.navigation import PHOTO_PARAM, UrlState
from imageground.sessions import SessionRegistry
from imageground.templates import GALLERY_TEMPLATE
from imageground.upload import UploadFlow

app = Flask(__name__)

DELETE_WORKERS = 4


@dataclass
class GalleryServices:
    settings: Settings
    media: CloudMediaService
    sessions: SessionRegistry
    executor: Executor


def init_app(flask_app, settings=None, media=None, executor=None):
    settings = settings or Settings.from_env()
    media = media or CloudMediaService(settings)
    executor = executor or ThreadPoolExecutor(max_workers=DELETE_WORKERS, thread_name_prefix='remote-delete')
    flask_app.config['MAX_CONTENT_LENGTH'] = settings.max_content_length
    flask_app.extensions['imageground'] = GalleryServices(
        settings=settings,
        media=media,
        sessions=SessionRegistry(media, executor, capacity=settings.session_capacity),
        executor=executor,
    )
    return flask_app


def services():
    return current_app.extensions['imageground']


def _session_id():
    if request.is_json:
        body = request.get_json(silent=True) or {}
        if body.get('session'):
            return body['session']
    return request.args.get('session') or request.headers.get('X-Gallery-Session', '')


def _page_session():
    session = services().sessions.get(_session_id())
    if session is None:
        return None, (jsonify({'success': False, 'message': 'Page session expired, reload the gallery'}), 410)
    return session, None


def _render_gallery(photo_id=None):
    svc = services()
    catalog, error = [], None
    if svc.settings.configured:
        try:
            catalog = load_catalog(svc.media, svc.settings.folder)
        except RemoteError as e:
            logger.error('Catalog load failed: {}', e)
            error = str(e)

    params = request.args.to_dict()
    if photo_id is None and params.get(PHOTO_PARAM, '').isdigit():
        photo_id = int(params[PHOTO_PARAM])

    session = svc.sessions.create(catalog, url_state=UrlState(params))
    with session.lock:
        if photo_id is not None:
            session.lightbox.open(photo_id)
        view = session.lightbox.view()
        images = session.store.visible()

    return render_template_string(
        GALLERY_TEMPLATE,
        images=images,
        media=svc.media,
        grid=GRID_RESOLUTION,
        configured=svc.settings.configured,
        catalog_error=error,
        session_id=session.id,
        initial_view=view,
        direct_landing=photo_id is not None,
    )


@app.errorhandler(RequestEntityTooLarge)
def request_too_large(e):
    message = 'File size must be less than 10MB'
    return jsonify({'success': False, 'error': message, 'message': message}), 413


@app.route('/')
def index():
    return _render_gallery()


@app.route('/p/<int:photo_id>')
def photo_page(photo_id):
    return _render_gallery(photo_id)


@app.route('/photos')
def get_photos():
    session, error = _page_session()
    if error:
        return error
    return jsonify([image.to_dict() for image in session.store.visible()])


def _lightbox_action(lightbox, action, body):
    if action == 'open':
        lightbox.open(int(body['id']))
    elif action == 'next':
        lightbox.next()
    elif action == 'previous':
        lightbox.previous()
    elif action == 'close':
        lightbox.close()
    elif action == 'key':
        lightbox.key(body.get('key', ''))
    elif action == 'swipe':
        lightbox.swipe(float(body.get('dx', 0)), float(body.get('dy', 0)), body.get('pointer', 'touch'))
    elif action == 'loaded':
        lightbox.loaded(int(body['token']))
    elif action == 'failed':
        lightbox.failed(int(body['token']))
    elif action == 'retry':
        lightbox.retry()
    elif action == 'delete':
        lightbox.request_delete()
    elif action == 'delete/cancel':
        lightbox.cancel_delete()
    elif action == 'delete/confirm':
        lightbox.confirm_delete()
    else:
        return False
    return True


@app.route('/api/lightbox/<path:action>', methods=['POST'])
def lightbox_action(action):
    session, error = _page_session()
    if error:
        return error

    body = request.get_json(silent=True) or {}
    with session.lock:
        try:
            if not _lightbox_action(session.lightbox, action, body):
                return jsonify({'success': False, 'message': f'Unknown action {action}'}), 404
        except NotFoundError as e:
            view = session.lightbox.view()
            view['alert'] = str(e)
            return jsonify(view), 404
        except (KeyError, ValueError, TypeError):
            return jsonify({'success': False, 'message': f'Bad request for {action}'}), 400
        return jsonify(session.lightbox.view())


@app.route('/upload', methods=['POST'])
def upload_file():
    session, error = _page_session()
    if error:
        return error
    if not services().settings.configured:
        return jsonify({
            'success': False,
            'message': 'Media service not configured. Please add CLOUDINARY_* settings to the .env file'
        }), 400

    file = request.files.get('file')
    if file is None or not file.filename:
        return jsonify({'success': False, 'message': 'No file provided'}), 400

    payload = file.read()
    flow = UploadFlow(services().media, session.store)
    try:
        result = flow.upload(file.mimetype, payload)
    except ValidationError as e:
        return jsonify({'success': False, 'message': str(e)}), 400
    except RemoteError as e:
        logger.error('Upload of {} failed: {}', secure_filename(file.filename), e)
        return jsonify({'success': False, 'message': str(e)}), 502

    return jsonify({
        'success': True,
        'message': session.store.upload.message,
        'data': result,
        'reload': True,
    }), 200


@app.route('/api/upload', methods=['POST'])
def api_upload():
    body = request.get_json(silent=True) or {}
    data_uri = body.get('file')
    if not data_uri:
        return jsonify({'error': 'No file provided'}), 400

    try:
        result = UploadFlow(services().media).upload_data_uri(data_uri)
    except ValidationError as e:
        return jsonify({'error': str(e)}), 400
    except RemoteError as e:
        logger.error('Upload failed: {}', e)
        return jsonify({'error': 'Upload failed', 'details': str(e)}), 500

    return jsonify({'success': True, 'data': result}), 200


@app.route('/api/delete', methods=['DELETE'])
def api_delete():
    body = request.get_json(silent=True) or {}
    remote_key = body.get('remoteKey') or body.get('publicId')
    if not remote_key:
        return jsonify({'error': 'Remote key is required'}), 400

    logger.info('Deleting {} on request', remote_key)
    try:
        result = services().media.destroy(remote_key)
    except RemoteError as e:
        logger.warning('Delete of {} failed: {}', remote_key, e)
        return jsonify({'success': False, 'error': 'Failed to delete image', 'details': str(e)}), 502

    if result == 'not found':
        return jsonify({'success': False, 'error': 'Image not found in cloud', 'result': result}), 404
    return jsonify({'success': True, 'message': 'Image deleted successfully', 'result': result}), 200


@app.route('/download/<int:photo_id>')
def download_file(photo_id):
    session, error = _page_session()
    if error:
        return error
    image = session.store.find(photo_id)
    if image is None:
        return jsonify({'success': False, 'message': 'Photo not found'}), 404

    media = services().media
    try:
        upstream = media.stream(media.delivery_url(image))
    except RemoteError as e:
        logger.warning('Download of {} failed: {}', image.remote_key, e)
        return jsonify({'success': False, 'message': str(e)}), 502

    def generate():
        try:
            yield from upstream.iter_content(chunk_size=64 * 1024)
        finally:
            upstream.close()

    filename = secure_filename(image.remote_key.rsplit('/', 1)[-1]) or f'photo-{photo_id}'
    return Response(
        stream_with_context(generate()),
        mimetype=upstream.headers.get('Content-Type', 'application/octet-stream'),
        headers={'Content-Disposition': f'attachment; filename="{filename}.jpg"'},
    )


init_app(app)

if __name__ == '__main__':
    settings = app.extensions['imageground'].settings
    init_logging(settings.log_dir, settings.log_level)
    logger.info('IMAGE GROUND running at http://localhost:5000')
    if not settings.configured:
        logger.warning('Media service not configured, the gallery will be empty')
    app.run(debug=True, host='0.0.0.0', port=5000)

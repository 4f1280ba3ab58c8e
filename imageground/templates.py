GALLERY_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <meta name="description" content="IMAGE GROUND - A modern, interactive image gallery with 3D effects, seamless uploads, and immersive viewing.">
    <meta property="og:site_name" content="IMAGE GROUND">
    <meta property="og:title" content="IMAGE GROUND - Modern Image Gallery">
    <meta name="twitter:card" content="summary_large_image">
    <title>IMAGE-GROUND</title>
    <style>
        * { margin: 0; padding: 0; box-sizing: border-box; }

        body {
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            background: #000;
            min-height: 100vh;
            color: #fff;
        }

        main { max-width: 1960px; margin: 0 auto; padding: 1rem; }

        .header { text-align: center; margin-bottom: 2rem; }
        .header h1 { font-size: 2.25rem; font-weight: 700; margin-bottom: 1rem; }
        .header p { color: rgba(255, 255, 255, 0.75); font-size: 1.125rem; }

        .notice {
            max-width: 800px;
            margin: 0 auto 2rem;
            padding: 1.5rem;
            background: rgba(255, 193, 7, 0.2);
            border: 2px solid rgba(255, 193, 7, 0.5);
            border-radius: 15px;
            text-align: center;
        }

        .gallery { columns: 1; column-gap: 0.25rem; }
        @media (min-width: 640px) { .gallery { columns: 2; } }
        @media (min-width: 1024px) { .gallery { columns: 3; } }
        @media (min-width: 1280px) { .gallery { columns: 4; } }
        @media (min-width: 1536px) { .gallery { columns: 5; } }

        .card-container { perspective: 1000px; break-inside: avoid; margin-bottom: 0.25rem; }

        .card {
            position: relative;
            padding: 0.25rem;
            border-radius: 0.5rem;
            border: 1px solid rgba(255, 255, 255, 0.2);
            background: rgba(0, 0, 0, 0.4);
            overflow: hidden;
            transform-style: preserve-3d;
            transition: transform 0.2s ease-out, box-shadow 0.5s ease-out;
        }

        .card:hover { box-shadow: 0 25px 50px rgba(59, 130, 246, 0.4); }
        .card img { width: 100%; display: block; border-radius: 0.25rem; filter: brightness(0.9); transition: all 0.5s ease-out; }
        .card:hover img { filter: brightness(1.1); transform: translateZ(60px) scale(1.05); }
        .card a { display: block; cursor: zoom-in; }

        .badge {
            position: absolute;
            top: 0.4rem;
            right: 0.4rem;
            padding: 0.25rem 0.5rem;
            font-size: 0.75rem;
            font-weight: 500;
            backdrop-filter: blur(12px);
            border-radius: 2px;
            z-index: 2;
            transform: translateZ(50px);
        }

        .upload-card {
            display: flex;
            flex-direction: column;
            align-items: center;
            justify-content: center;
            height: 240px;
            color: rgba(255, 255, 255, 0.4);
            cursor: pointer;
        }

        .upload-card:hover { color: rgba(255, 255, 255, 0.7); }
        .upload-card .plus { font-size: 2rem; border: 3px dashed currentColor; border-radius: 50%; width: 3rem; height: 3rem; display: flex; align-items: center; justify-content: center; margin-bottom: 0.75rem; }

        .spinner {
            width: 3rem;
            height: 3rem;
            border-radius: 50%;
            border: 3px solid rgba(255, 255, 255, 0.3);
            border-top-color: #fff;
            animation: spin 1s linear infinite;
            margin: 0 auto 1rem;
        }

        @keyframes spin { to { transform: rotate(360deg); } }

        .lightbox {
            display: none;
            position: fixed;
            inset: 0;
            z-index: 1000;
            background: rgba(0, 0, 0, 0.7);
            backdrop-filter: blur(40px);
            background-size: cover;
            align-items: center;
            justify-content: center;
            user-select: none;
        }

        .lightbox.active { display: flex; }

        .lightbox-img { max-width: calc(100vw - 2rem); max-height: calc(100vh - 2rem); object-fit: contain; transition: transform 0.3s ease, opacity 0.2s ease; }
        .lightbox-img.enter-next { transform: translateX(60px); opacity: 0; }
        .lightbox-img.enter-previous { transform: translateX(-60px); opacity: 0; }

        .overlay-state {
            position: absolute;
            inset: 0;
            display: none;
            align-items: center;
            justify-content: center;
            flex-direction: column;
            background: rgba(0, 0, 0, 0.5);
            z-index: 30;
        }

        .overlay-state.active { display: flex; }

        .round-btn {
            border: none;
            border-radius: 50%;
            padding: 0.6rem 0.8rem;
            background: rgba(0, 0, 0, 0.5);
            color: rgba(255, 255, 255, 0.75);
            cursor: pointer;
            font-size: 1.1rem;
            text-decoration: none;
        }

        .round-btn:hover { background: rgba(0, 0, 0, 0.75); color: #fff; }
        .round-btn.danger { background: rgba(220, 38, 38, 0.5); }

        .chrome { display: none; }
        .chrome.active { display: block; }

        .nav-btn { position: absolute; top: 50%; transform: translateY(-50%); z-index: 40; }
        .nav-prev { left: 0.75rem; }
        .nav-next { right: 0.75rem; }

        .top-left, .top-right { position: absolute; top: 0; display: flex; gap: 0.5rem; padding: 0.75rem; z-index: 40; }
        .top-left { left: 0; }
        .top-right { right: 0; }

        .thumbs {
            position: fixed;
            left: 0;
            right: 0;
            bottom: 0;
            display: flex;
            justify-content: center;
            gap: 2px;
            padding: 1.5rem 0;
            background: linear-gradient(to bottom, transparent, rgba(0, 0, 0, 0.6));
            z-index: 40;
            overflow: hidden;
        }

        .thumbs button { border: none; background: none; cursor: pointer; height: 3.5rem; }
        .thumbs img { height: 100%; border-radius: 2px; filter: brightness(0.6) contrast(1.25); }
        .thumbs button.current img { filter: brightness(1.1); transform: scale(1.25); box-shadow: 0 1px 3px rgba(0, 0, 0, 0.5); }

        .confirm {
            position: absolute;
            inset: 0;
            display: none;
            align-items: center;
            justify-content: center;
            background: rgba(0, 0, 0, 0.8);
            z-index: 50;
        }

        .confirm.active { display: flex; }
        .confirm .dialog { background: #111827; border: 1px solid rgba(55, 65, 81, 0.5); border-radius: 0.75rem; padding: 2rem; max-width: 28rem; }
        .confirm h3 { margin-bottom: 0.75rem; }
        .confirm p { color: #d1d5db; font-size: 0.875rem; margin-bottom: 2rem; line-height: 1.6; }
        .confirm .actions { display: flex; gap: 0.75rem; justify-content: flex-end; }
        .confirm .actions button { padding: 0.6rem 1.5rem; border-radius: 0.5rem; border: none; cursor: pointer; font-weight: 500; }
        .confirm .cancel { background: #374151; color: #e5e7eb; }
        .confirm .delete { background: #dc2626; color: #fff; }

        footer { padding: 1.5rem; text-align: center; color: rgba(255, 255, 255, 0.8); }
    </style>
</head>
<body>
    <main>
        <div class="header">
            <h1>IMAGE GROUND</h1>
            <p>Browse through my collection with 3D effects</p>
        </div>

        {% if not configured %}
        <div class="notice">
            <h3>Setup Required</h3>
            <p>Add <code>CLOUDINARY_CLOUD_NAME</code>, <code>CLOUDINARY_API_KEY</code>, <code>CLOUDINARY_API_SECRET</code>
               and <code>CLOUDINARY_FOLDER</code> to the <code>.env</code> file, then restart the server.</p>
        </div>
        {% elif catalog_error %}
        <div class="notice">
            <h3>Could not load the gallery</h3>
            <p>{{ catalog_error }}</p>
        </div>
        {% endif %}

        <div class="gallery" id="gallery">
            <div class="card-container">
                <div class="card upload-card" id="uploadCard">
                    <div class="plus" id="uploadIcon">+</div>
                    <p id="uploadLabel">Upload</p>
                </div>
            </div>
            {% for image in images %}
            <div class="card-container" id="photo-{{ image.id }}">
                <div class="card">
                    <div class="badge">{{ image.created_label }}</div>
                    <a href="/p/{{ image.id }}" data-photo-id="{{ image.id }}">
                        <img src="{{ media.delivery_url(image, grid) }}"
                             style="aspect-ratio: {{ image.aspect_ratio }}; background: url('{{ image.blur_placeholder }}') center / cover;"
                             alt="Gallery photo" loading="lazy">
                    </a>
                </div>
            </div>
            {% endfor %}
        </div>

        <input type="file" id="fileInput" accept="image/*" hidden aria-label="Upload image file">
    </main>

    <div id="lightbox" class="lightbox">
        <div class="overlay-state" id="loadingState">
            <div class="spinner"></div>
            <p>Loading image...</p>
        </div>
        <div class="overlay-state" id="errorState">
            <p style="font-size: 3rem; color: #ef4444;">!</p>
            <p style="margin-bottom: 1rem;">Failed to load image</p>
            <button class="round-btn" style="border-radius: 0.5rem;" onclick="act('retry')">Try Again</button>
        </div>

        <img id="lightboxImg" class="lightbox-img" alt="Gallery image">

        <div class="chrome" id="chrome">
            <button class="round-btn nav-btn nav-prev" id="prevBtn" title="Previous image" onclick="act('previous')">&lsaquo;</button>
            <button class="round-btn nav-btn nav-next" id="nextBtn" title="Next image" onclick="act('next')">&rsaquo;</button>
            <div class="top-left">
                <button class="round-btn" title="Close" onclick="act('close')">&times;</button>
            </div>
            <div class="top-right">
                <a class="round-btn" id="originalLink" target="_blank" rel="noreferrer" title="Open fullsize version">&#8599;</a>
                <a class="round-btn" id="downloadLink" title="Download fullsize version">&#8595;</a>
                <button class="round-btn danger" title="Delete image" onclick="act('delete')">&#128465;</button>
            </div>
            <div class="thumbs" id="thumbs"></div>
        </div>

        <div class="confirm" id="confirmDialog">
            <div class="dialog">
                <h3>Delete Image</h3>
                <p>Are you sure you want to delete this image? This action cannot be undone and the image will be permanently removed from your gallery.</p>
                <div class="actions">
                    <button class="cancel" onclick="act('delete/cancel')">Cancel</button>
                    <button class="delete" onclick="act('delete/confirm')">Delete</button>
                </div>
            </div>
        </div>
    </div>

    <footer><p>&copy; 2025 IMAGE-GROUND</p></footer>

    <script>
        const SESSION = {{ session_id|tojson }};
        const MAX_UPLOAD = 10 * 1024 * 1024;
        let view = {{ initial_view|tojson }};
        let loadToken = null;

        async function act(action, body = {}, push = true) {
            const res = await fetch('/api/lightbox/' + action, {
                method: 'POST',
                headers: { 'Content-Type': 'application/json' },
                body: JSON.stringify({ session: SESSION, ...body })
            });
            if (res.status === 410) { location.reload(); return; }
            const data = await res.json();
            if (data.alert) alert(data.alert);
            if ('open' in data) render(data, push);
        }

        function render(next, push = true) {
            view = next;
            if (push && view.displayUrl !== location.pathname + location.search) {
                history.pushState({ photoId: view.photoId }, '', view.displayUrl);
            }
            if (view.open === false) {
                document.getElementById('lightbox').classList.remove('active');
                loadToken = null;
                syncGallery();
                if (view.scrollTo !== null && view.scrollTo !== undefined) {
                    const card = document.getElementById('photo-' + view.scrollTo);
                    if (card) card.scrollIntoView({ block: 'center' });
                }
                return;
            }

            const box = document.getElementById('lightbox');
            box.classList.add('active');
            if ({{ 'true' if direct_landing else 'false' }} && view.image.blurDataUrl) {
                box.style.backgroundImage = `url('${view.image.blurDataUrl}')`;
            }

            const img = document.getElementById('lightboxImg');
            if (view.load && view.load.token !== loadToken) {
                loadToken = view.load.token;
                const token = loadToken;
                img.className = 'lightbox-img' + (view.direction > 0 ? ' enter-next' : view.direction < 0 ? ' enter-previous' : '');
                img.onload = () => { img.className = 'lightbox-img'; act('loaded', { token }, false); };
                img.onerror = () => act('failed', { token }, false);
                img.src = view.load.src;
            }

            document.getElementById('loadingState').classList.toggle('active', view.status === 'loading');
            document.getElementById('errorState').classList.toggle('active', view.status === 'errored');
            document.getElementById('chrome').classList.toggle('active', view.chrome);
            document.getElementById('prevBtn').style.display = view.hasPrevious ? '' : 'none';
            document.getElementById('nextBtn').style.display = view.hasNext ? '' : 'none';
            document.getElementById('originalLink').href = view.image.originalSrc;
            document.getElementById('downloadLink').href = `/download/${view.photoId}?session=${SESSION}`;
            document.getElementById('confirmDialog').classList.toggle('active', view.confirmDelete);
            document.getElementById('thumbs').innerHTML = view.thumbnails.map(t =>
                `<button class="${t.current ? 'current' : ''}" onclick="act('open', { id: ${t.id} })">
                    <img src="${t.src}" alt="small photos on the bottom" onerror="this.style.display='none'">
                 </button>`).join('');
        }

        async function syncGallery() {
            const res = await fetch('/photos?session=' + SESSION);
            if (res.status === 410) { location.reload(); return; }
            const visible = new Set((await res.json()).map(p => p.id));
            document.querySelectorAll('.card-container[id^="photo-"]').forEach(card => {
                if (!visible.has(Number(card.id.slice(6)))) card.remove();
            });
        }

        document.getElementById('gallery').addEventListener('click', (e) => {
            const link = e.target.closest('a[data-photo-id]');
            if (!link) return;
            e.preventDefault();
            act('open', { id: Number(link.dataset.photoId) });
        });

        document.querySelectorAll('.card:not(.upload-card)').forEach(card => {
            card.addEventListener('mousemove', (e) => {
                const r = card.getBoundingClientRect();
                const x = (e.clientX - r.left - r.width / 2) / 25;
                const y = (e.clientY - r.top - r.height / 2) / 25;
                card.style.transform = `rotateY(${x}deg) rotateX(${-y}deg)`;
            });
            card.addEventListener('mouseleave', () => { card.style.transform = 'rotateY(0deg) rotateX(0deg)'; });
        });

        document.addEventListener('keydown', (e) => {
            if (!view.open) return;
            if (['ArrowLeft', 'ArrowRight', 'Escape'].includes(e.key)) act('key', { key: e.key });
        });

        let pointerStart = null;
        const lightbox = document.getElementById('lightbox');
        lightbox.addEventListener('pointerdown', (e) => { pointerStart = { x: e.clientX, y: e.clientY }; });
        lightbox.addEventListener('pointerup', (e) => {
            if (!pointerStart || !view.open) return;
            const dx = e.clientX - pointerStart.x;
            const dy = e.clientY - pointerStart.y;
            pointerStart = null;
            if (Math.abs(dx) >= 10) act('swipe', { dx, dy, pointer: e.pointerType === 'mouse' ? 'mouse' : 'touch' });
        });

        window.addEventListener('popstate', () => {
            const match = location.pathname.match(/^\\/p\\/(\\d+)/) || location.search.match(/photoId=(\\d+)/);
            if (match) act('open', { id: Number(match[1]) }, false);
            else if (view.open) act('close', {}, false);
        });

        const uploadLabel = document.getElementById('uploadLabel');
        document.getElementById('uploadCard').addEventListener('click', () => document.getElementById('fileInput').click());
        document.getElementById('fileInput').addEventListener('change', async (e) => {
            const file = e.target.files[0];
            e.target.value = '';
            if (!file) return;
            if (!file.type.startsWith('image/')) { alert('Please select an image file'); return; }
            if (file.size > MAX_UPLOAD) { alert('File size must be less than 10MB'); return; }

            const formData = new FormData();
            formData.append('file', file);
            uploadLabel.textContent = 'Uploading to cloud...';
            try {
                const res = await fetch('/upload', { method: 'POST', body: formData, headers: { 'X-Gallery-Session': SESSION } });
                const data = await res.json();
                if (data.success) {
                    uploadLabel.textContent = data.message;
                    setTimeout(() => location.reload(), 1500);
                } else {
                    alert('Upload failed: ' + data.message);
                    uploadLabel.textContent = 'Upload';
                }
            } catch (err) {
                alert('Upload failed: ' + err.message);
                uploadLabel.textContent = 'Upload';
            }
        });

        history.replaceState({ photoId: view.photoId }, '', view.displayUrl);
        render(view, false);
    </script>
</body>
</html>
"""

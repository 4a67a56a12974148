EXPLORER_HTML = """
<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>Space Biology - Knowledge Graph Explorer</title>
    <link rel="icon" href="/favicon.ico">
    <link href="https://fonts.googleapis.com/css2?family=Orbitron:wght@700&display=swap" rel="stylesheet">
    <style>
        * { margin: 0; padding: 0; box-sizing: border-box; }
        body { background: #05060d; font-family: -apple-system, sans-serif; color: #e0e0ff; overflow: hidden; }
        #graph { width: 100vw; height: 100vh; }

        #info { position: absolute; top: 16px; left: 16px; color: #8b949e; z-index: 10; pointer-events: none; }
        #info h1 { font-size: 11px; color: #5eead480; font-weight: 400; text-transform: uppercase; letter-spacing: 3px; margin-top: 6px; }
        #info .brand { font-family: 'Orbitron', sans-serif; font-size: 28px; font-weight: 700; color: #5eead4; text-shadow: 0 0 20px #5eead440; letter-spacing: 3px; }

        #banner {
            position: absolute; top: 0; left: 0; right: 0; z-index: 1000;
            padding: 10px 16px; background: #450a0a; border-bottom: 1px solid #b91c1c;
            color: #fecaca; font-size: 13px; text-align: center; display: none;
        }
        #banner.visible { display: block; }

        #query-panel {
            position: absolute; top: 100px; left: 16px; width: 420px; z-index: 100;
            background: rgba(10,10,18,0.95); padding: 16px; border-radius: 8px; border: 1px solid #1a1a2e;
        }
        #query-input {
            width: 100%; padding: 10px 12px; resize: vertical;
            background: #000; border: 1px solid #1a1a2e; border-radius: 6px;
            color: #e0e0ff; font-family: monospace; font-size: 13px;
        }
        #query-input:focus { outline: none; border-color: #5eead4; }
        #query-input::placeholder { color: #4a4a6a; }
        .toggle-btn {
            padding: 6px 12px; background: #0f0f1a; border: 1px solid #1a1a2e;
            border-radius: 4px; color: #8b949e; cursor: pointer; font-size: 11px;
        }
        .toggle-btn:hover { border-color: #5eead4; color: #5eead4; }
        .control-row { display: flex; justify-content: flex-end; gap: 8px; margin-top: 10px; }

        #query-error {
            margin-top: 10px; padding: 8px; border-radius: 6px; display: none;
            background: rgba(69,10,10,0.4); border: 1px solid #991b1b; color: #f87171; font-size: 12px;
        }
        #query-error.visible { display: block; }

        #results-title { margin-top: 14px; font-size: 12px; color: #8b949e; text-transform: uppercase; letter-spacing: 2px; }
        #results { margin-top: 8px; max-height: 300px; overflow-y: auto; }
        .result { padding: 8px; margin-bottom: 6px; border: 1px solid #1a1a2e; border-radius: 6px; font-size: 12px; }
        .result .s { color: #818cf8; }
        .result .p { color: #f472b6; }
        .result .o { color: #34d399; }
        .empty { color: #4a4a6a; font-size: 12px; }

        #stats { position: absolute; top: 16px; right: 16px; background: rgba(10,10,18,0.95); padding: 12px 16px; border-radius: 6px; border: 1px solid #1a1a2e; font-size: 11px; color: #8b8ba0; z-index: 10; }
        #stats span { color: #5eead4; font-weight: 500; }
        #loading { position: absolute; top: 50%; left: 50%; transform: translate(-50%, -50%); color: #5eead4; z-index: 10; }
    </style>
</head>
<body>
    <div id="banner"></div>
    <div id="graph"></div>
    <div id="loading">Loading Space Biology Knowledge Graph...</div>

    <div id="info">
        <div class="brand">KG EXPLORER</div>
        <h1>Space biology knowledge graph</h1>
    </div>

    <div id="stats">
        Nodes <span id="stat-nodes">-</span> &middot;
        Edges <span id="stat-edges">-</span> &middot;
        Subjects <span id="stat-subjects">-</span> &middot;
        Objects <span id="stat-objects">-</span>
    </div>

    <div id="query-panel">
        <textarea id="query-input" rows="3" placeholder='Try: MATCH (s)-[p]->(o) WHERE s = "microgravity"'></textarea>
        <div class="control-row">
            <button class="toggle-btn" id="overview-btn">Overview</button>
            <button class="toggle-btn" id="run-btn">Run Query</button>
        </div>
        <div id="query-error"></div>
        <div id="results-title">Results (0)</div>
        <div id="results"><p class="empty">No results found.</p></div>
    </div>

    <script src="https://unpkg.com/3d-force-graph"></script>
    <script>
        const groupColors = { 1: '#818cf8', 2: '#34d399', subject: '#818cf8', object: '#34d399' };

        const banner = document.getElementById('banner');
        const errorBox = document.getElementById('query-error');
        const resultsBox = document.getElementById('results');
        const resultsTitle = document.getElementById('results-title');

        const Graph = ForceGraph3D()(document.getElementById('graph'))
            .backgroundColor('#05060d')
            .nodeLabel(n => n.name || n.id)
            .nodeVal(n => n.val || 1)
            .nodeColor(n => groupColors[n.group || n.type] || '#5eead4')
            .linkLabel(l => l.predicate || l.label)
            .linkOpacity(0.7)
            .linkColor(() => 'rgba(99,102,241,0.6)')
            .linkDirectionalArrowLength(3)
            .linkDirectionalArrowRelPos(1)
            .enableNodeDrag(true);

        function escapeHtml(text) {
            const div = document.createElement('div');
            div.textContent = text == null ? '' : String(text);
            return div.innerHTML;
        }

        function showBanner(message) {
            banner.textContent = message;
            banner.classList.add('visible');
        }

        function showError(message) {
            errorBox.textContent = message;
            errorBox.classList.toggle('visible', !!message);
        }

        function renderResults(results) {
            resultsTitle.textContent = `Results (${results.length})`;
            if (results.length === 0) {
                resultsBox.innerHTML = '<p class="empty">No results found.</p>';
                return;
            }
            resultsBox.innerHTML = results.map(t => `
                <div class="result">
                    <div><span class="s">Subject:</span> ${escapeHtml(t.subject)}</div>
                    <div><span class="p">Predicate:</span> ${escapeHtml(t.predicate)}</div>
                    <div><span class="o">Object:</span> ${escapeHtml(t.object)}</div>
                </div>`).join('');
        }

        async function loadOverview() {
            const res = await fetch('/graph/data');
            const data = await res.json();
            if (!res.ok) {
                showBanner(data.detail || 'Failed to load triples dataset.');
                return;
            }
            Graph.graphData(data);
        }

        async function loadStats() {
            const res = await fetch('/api/stats');
            if (!res.ok) return;
            const stats = await res.json();
            document.getElementById('stat-nodes').textContent = stats.nodes.toLocaleString();
            document.getElementById('stat-edges').textContent = stats.edges.toLocaleString();
            document.getElementById('stat-subjects').textContent = stats.subjects.toLocaleString();
            document.getElementById('stat-objects').textContent = stats.objects.toLocaleString();
        }

        async function runQuery() {
            showError(null);
            const query = document.getElementById('query-input').value;
            const res = await fetch('/api/query', {
                method: 'POST',
                headers: { 'Content-Type': 'application/json' },
                body: JSON.stringify({ query }),
            });
            const data = await res.json();

            if (res.status === 503) {
                showBanner(data.detail);
                return;
            }
            // Keep the previous results on screen when a query is rejected
            if (!res.ok) {
                showError(data.detail);
                return;
            }

            renderResults(data.results);
            Graph.graphData(data.graph);
        }

        document.getElementById('run-btn').addEventListener('click', runQuery);
        document.getElementById('overview-btn').addEventListener('click', loadOverview);

        fetch('/health')
            .then(res => res.json())
            .then(health => {
                if (!health.dataset_loaded) {
                    showBanner(health.error || 'Failed to load triples dataset.');
                    return;
                }
                return Promise.all([loadOverview(), loadStats()]);
            })
            .catch(() => showBanner('Failed to load triples dataset.'))
            .finally(() => document.getElementById('loading').remove());
    </script>
</body>
</html>
"""

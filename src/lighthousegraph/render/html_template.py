"""Self-contained HTML template for a dependency graph snapshot.

The graph is an inline SVG; no scripts or external assets, so the file
works fully offline.
"""

HTML_TEMPLATE = r"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{{TITLE}}</title>
<style>
:root {
    --bg-primary: #ffffff;
    --bg-secondary: #f5f7fa;
    --border: #d0d7de;
    --text-primary: #2c3e50;
    --text-secondary: #34495e;
    --text-muted: #6e7681;
    --dependency: #EC5800;
    --link: #555555;
}
* { margin: 0; padding: 0; box-sizing: border-box; }
body { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, 'Helvetica Neue', sans-serif; background: var(--bg-primary); color: var(--text-primary); line-height: 1.5; }
.container { max-width: 1440px; margin: 0 auto; padding: 24px; }
.graph-header { border-bottom: 1px solid var(--border); padding-bottom: 12px; margin-bottom: 16px; }
.graph-header h1 { font-size: 20px; font-weight: 600; }
.graph-meta { color: var(--text-muted); font-size: 13px; }
.graph-legend { display: flex; gap: 16px; font-size: 13px; margin-top: 8px; }
.legend-dot { display: inline-block; width: 10px; height: 10px; border-radius: 50%; margin-right: 6px; vertical-align: middle; }
#graph-container svg { max-width: 100%; height: auto; background: var(--bg-secondary); border: 1px solid var(--border); border-radius: 8px; }
#graph-container a circle { cursor: pointer; }
#graph-container a:hover text { text-decoration: underline; }
</style>
</head>
<body>
<div class="container">
    <div class="graph-header">
        <h1>{{TITLE}}</h1>
        <div class="graph-meta">{{SUMMARY}}</div>
        <div class="graph-legend">
            <span><span class="legend-dot" style="background: var(--text-primary)"></span>Tracked model</span>
            <span><span class="legend-dot" style="background: var(--dependency)"></span>Dependency</span>
        </div>
    </div>
    <div id="graph-container">
{{SVG}}
    </div>
</div>
</body>
</html>
"""

VIEWER_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <title>View Data</title>
  <style>
    body { font-family: sans-serif; max-width: 800px; margin: 40px auto; padding: 20px; }
    input { padding: 8px; font-size: 16px; width: 300px; }
    button { padding: 8px 16px; font-size: 16px; cursor: pointer; }
    pre { background: #f4f4f4; padding: 20px; overflow: auto; border-radius: 4px; }
    .error { color: red; }
  </style>
</head>
<body>
  <h1>View Stored Data</h1>
  <form id="load-form">
    <input type="password" id="key" placeholder="Enter view key" autocomplete="off" />
    <button type="submit">Load Data</button>
  </form>
  <div id="result"></div>
  <script>
    function show(tag, text, className) {
      const result = document.getElementById('result');
      const el = document.createElement(tag);
      if (className) el.className = className;
      el.textContent = text;
      result.replaceChildren(el);
    }

    async function fetchData(event) {
      event.preventDefault();
      const key = document.getElementById('key').value.trim();
      try {
        const res = await fetch('/data', { headers: { 'x-view-key': key } });
        const data = await res.json();
        if (res.ok) {
          show('pre', JSON.stringify(data, null, 2));
        } else {
          show('p', data.error, 'error');
        }
      } catch (err) {
        show('p', err.message, 'error');
      }
    }

    document.getElementById('load-form').addEventListener('submit', fetchData);
  </script>
</body>
</html>
"""

import html

class HTMLVisualizer:
    """
    Generates a side-by-side HTML report of paired lines with the anchor
    word of every pair highlighted. Supports Dark Mode.
    """

    HEAD_TEMPLATE = """
    <!DOCTYPE html>
    <html lang="en">
    <head>
        <meta charset="utf-8">
        <title>Line Pair Report</title>
        <style>
            :root {
                --bg-color: #f6f8fa; --container-bg: #ffffff; --text-color: #24292f;
                --border-color: #d0d7de; --line-num-text: #6e7781;
                --added-bg: #e6ffec; --deleted-bg: #ffebe9; --paired-bg: #fff8c5;
                --hunk-bg: #ddf4ff; --mark-bg: #ffd33d;
            }
            [data-theme="dark"] {
                --bg-color: #0d1117; --container-bg: #161b22; --text-color: #c9d1d9;
                --border-color: #30363d; --line-num-text: #8b949e;
                --added-bg: rgba(46, 160, 67, 0.15); --deleted-bg: rgba(248, 81, 73, 0.15);
                --paired-bg: rgba(210, 153, 34, 0.15); --hunk-bg: rgba(56, 139, 253, 0.15);
                --mark-bg: rgba(210, 153, 34, 0.6);
            }
            body { font-family: -apple-system, "Segoe UI", Helvetica, Arial, sans-serif; background-color: var(--bg-color); color: var(--text-color); margin: 0; padding: 20px; }
            .container { max-width: 1600px; margin: 0 auto; background: var(--container-bg); border: 1px solid var(--border-color); border-radius: 6px; overflow: hidden; }
            .header { padding: 16px; border-bottom: 1px solid var(--border-color); display: flex; justify-content: space-between; align-items: center; }
            h2 { margin: 0; font-size: 16px; }
            .toggle-btn { background: none; border: 1px solid var(--border-color); color: var(--text-color); padding: 5px 12px; border-radius: 6px; cursor: pointer; font-size: 12px; }
            table { width: 100%; border-collapse: collapse; table-layout: fixed; font-size: 12px; font-family: ui-monospace, Menlo, Consolas, monospace; }
            td { padding: 0; vertical-align: top; line-height: 20px; }
            .line-num { width: 50px; text-align: right; padding-right: 10px; color: var(--line-num-text); user-select: none; border-right: 1px solid var(--border-color); }
            .code-content { padding-left: 10px; white-space: pre-wrap; word-break: break-all; }
            .row-hunk td { background-color: var(--hunk-bg); color: var(--line-num-text); padding: 2px 10px; }
            .row-paired { background-color: var(--paired-bg); }
            .row-deleted .left, .row-deleted .left-num { background-color: var(--deleted-bg); }
            .row-added .right, .row-added .right-num { background-color: var(--added-bg); }
            mark { background-color: var(--mark-bg); color: inherit; border-radius: 2px; }
        </style>
        <script>
            function toggleTheme() {
                const root = document.documentElement;
                const newTheme = root.getAttribute('data-theme') === 'dark' ? 'light' : 'dark';
                root.setAttribute('data-theme', newTheme);
                localStorage.setItem('linepair-theme', newTheme);
            }
            (function() {
                document.documentElement.setAttribute('data-theme', localStorage.getItem('linepair-theme') || 'light');
            })();
        </script>
    </head>
    <body>
        <div class="container">
            <div class="header">
                <h2>Line Pair Report</h2>
                <button class="toggle-btn" onclick="toggleTheme()">Toggle Theme</button>
            </div>
            <table>
                <col width="4%">
                <col width="46%">
                <col width="4%">
                <col width="46%">
    """

    FOOT_TEMPLATE = """
            </table>
        </div>
    </body>
    </html>
    """

    def generate(self, results, output_path="linepair_report.html"):
        """
        Writes the report.

        Args:
            results (list): (hunk, entries) tuples as built by match_hunk().
            output_path (str): Path of the HTML file.
        """
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(self.render(results))

    def render(self, results) -> str:
        html_content = [self.HEAD_TEMPLATE]
        previous_header = None
        for hunk, entries in results:
            if hunk.header and hunk.header != previous_header:
                html_content.append(f'<tr class="row-hunk"><td colspan="4">{html.escape(hunk.header)}</td></tr>')
            previous_header = hunk.header
            for removed, added, anchor in entries:
                html_content.append(self._render_row(removed, added, anchor))
        html_content.append(self.FOOT_TEMPLATE)
        return "\n".join(html_content)

    def _render_row(self, removed, added, anchor) -> str:
        if removed and added:
            row_class = "row-paired"
        elif removed:
            row_class = "row-deleted"
        else:
            row_class = "row-added"

        left_num = removed.number if removed else ""
        right_num = added.number if added else ""
        word = anchor.word if anchor else None
        left_code = self._highlight(removed.text, anchor.removed_start if word else 0, word) if removed else ""
        right_code = self._highlight(added.text, anchor.added_start if word else 0, word) if added else ""

        return f"""
            <tr class="{row_class}">
                <td class="line-num left-num">{left_num}</td>
                <td class="code-content left">{left_code}</td>
                <td class="line-num right-num">{right_num}</td>
                <td class="code-content right">{right_code}</td>
            </tr>
            """

    @staticmethod
    def _highlight(text, start, word) -> str:
        """Escapes text and wraps the anchor word found at start in <mark>."""
        if not word:
            return html.escape(text)
        end = start + len(word)
        return (html.escape(text[:start]) + "<mark>" + html.escape(text[start:end])
                + "</mark>" + html.escape(text[end:]))

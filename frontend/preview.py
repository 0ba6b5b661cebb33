"""
Live preview: dựng 1 trang HTML độc lập (chạy trong iframe sandbox của
Streamlit) để compile code TSX bằng Babel standalone và render bằng React.
"""

import json
import re
from typing import Optional

REACT_VERSION = "19"

_IMPORT_RE = re.compile(
    r"^\s*import\s+(?:type\s+)?(?:[\s\S]*?\s+from\s+)?['\"][^'\"]+['\"]\s*;?[ \t]*$",
    re.MULTILINE,
)
_EXPORT_DEFAULT_FN_RE = re.compile(r"export\s+default\s+function\s+([A-Za-z_$][\w$]*)")
_EXPORT_DEFAULT_NAME_RE = re.compile(r"^\s*export\s+default\s+([A-Za-z_$][\w$]*)\s*;?\s*$", re.MULTILINE)
_COMPONENT_RE = re.compile(
    r"^\s*(?:export\s+)?(?:function\s+([A-Z][\w$]*)|(?:const|let)\s+([A-Z][\w$]*)\s*[:=])",
    re.MULTILINE,
)

HOOKS = (
    "useState", "useEffect", "useMemo", "useCallback", "useRef",
    "useReducer", "useContext", "useId", "useLayoutEffect", "Fragment",
)


def find_component_name(code: str) -> Optional[str]:
    """Ưu tiên export default, nếu không có thì lấy component viết hoa cuối cùng."""
    m = _EXPORT_DEFAULT_FN_RE.search(code)
    if m:
        return m.group(1)
    m = _EXPORT_DEFAULT_NAME_RE.search(code)
    if m:
        return m.group(1)

    names = [a or b for a, b in _COMPONENT_RE.findall(code)]
    return names[-1] if names else None


def prepare_source(code: str) -> str:
    """Bỏ import/export vì code chạy trong Function, không phải ES module."""
    src = _IMPORT_RE.sub("", code)
    src = _EXPORT_DEFAULT_NAME_RE.sub("", src)
    src = re.sub(r"export\s+default\s+", "", src)
    src = re.sub(r"^(\s*)export\s+(?=(?:function|const|let|class|interface|type|enum)\b)", r"\1", src, flags=re.MULTILINE)
    return src.strip()


def _script_json(value) -> str:
    # tránh "</script>" trong code đóng thẻ sớm
    return json.dumps(value).replace("</", "<\\/")


def build_preview_html(code: str) -> str:
    name = find_component_name(code)
    source = prepare_source(code)

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <script src="https://cdn.tailwindcss.com"></script>
  <script src="https://unpkg.com/@babel/standalone@7/babel.min.js"></script>
  <style>
    #figment-error {{ display: none; white-space: pre-wrap; font: 12px/1.4 monospace;
      color: #b91c1c; background: #fef2f2; padding: 12px; border: 1px solid #fecaca; }}
  </style>
</head>
<body>
  <pre id="figment-error"></pre>
  <div id="root"></div>
  <script type="module">
    import React from "https://esm.sh/react@{REACT_VERSION}";
    import {{ createRoot }} from "https://esm.sh/react-dom@{REACT_VERSION}/client";

    const source = {_script_json(source)};
    const componentName = {_script_json(name)};
    const hooks = {_script_json(list(HOOKS))};

    function showError(err) {{
      const box = document.getElementById("figment-error");
      box.textContent = String(err && err.stack ? err.stack : err);
      box.style.display = "block";
    }}
    window.addEventListener("error", (e) => showError(e.error || e.message));

    try {{
      if (!componentName) throw new Error("No React component found in the code.");
      const compiled = Babel.transform(source, {{
        filename: "Component.tsx",
        presets: [["typescript", {{ isTSX: true, allExtensions: true }}], ["react", {{ runtime: "classic" }}]],
      }}).code;
      const prelude = "const {{ " + hooks.join(", ") + " }} = React;\\n";
      const factory = new Function("React", prelude + compiled + "\\nreturn " + componentName + ";");
      const Component = factory(React);
      createRoot(document.getElementById("root")).render(React.createElement(Component));
    }} catch (err) {{
      showError(err);
    }}
  </script>
</body>
</html>
"""

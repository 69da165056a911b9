"""
Assets statiques du document exporté : feuille de style + script de validation.
"""
from ..core.config import EDITOR_COLUMN_ATTR, EDITOR_SECTION_ATTR

STYLESHEET = """
    * { margin: 0; padding: 0; box-sizing: border-box; }
    body {
      font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, 'Helvetica Neue', Arial, sans-serif;
      color: #1e293b;
      background: #f1f5f9;
      font-size: 14px;
      line-height: 1.6;
    }
    form {
      max-width: 800px;
      margin: 32px auto;
      padding: 40px;
      background: white;
      border-radius: 8px;
      box-shadow: 0 1px 3px 0 rgba(0, 0, 0, 0.1);
    }
    h1, h2, h3, h4, h5, h6 { font-weight: 600; line-height: 1.3; color: #0f172a; }
    p { word-wrap: break-word; }
    table { width: 100%%; border-collapse: collapse; table-layout: fixed; }
    td, th { padding: 8px; vertical-align: top; word-wrap: break-word; }
    input, select, textarea { outline: none; font-family: inherit; font-size: inherit; }
    input:focus, select:focus, textarea:focus {
      border-color: #3b82f6;
      box-shadow: 0 0 0 3px rgba(59, 130, 246, 0.1);
    }
    .placeholder { background-color: #b3d4fc; padding: 0 2px; border-radius: 2px; }
    .field-help { display: block; font-size: 12px; color: #64748b; margin-top: 4px; }
    ul, ol { margin-left: 24px; }
    li { padding: 4px 0; }
    @media (max-width: 768px) {
      form { margin: 16px; padding: 24px; }
      [%(section)s] { flex-direction: column !important; }
      [%(column)s] { width: 100%% !important; }
    }
""" % {"section": EDITOR_SECTION_ATTR, "column": EDITOR_COLUMN_ATTR}

VALIDATION_SCRIPT = """<script>
(function() {
  document.addEventListener('DOMContentLoaded', function() {
    var form = document.querySelector('form');
    if (!form) return;
    form.addEventListener('submit', function(e) {
      var firstInvalid = null;
      form.querySelectorAll('[required]').forEach(function(field) {
        field.style.borderColor = '';
        var valid = field.type === 'checkbox' ? field.checked : field.value.trim() !== '';
        if (!valid) {
          field.style.borderColor = '#ef4444';
          if (!firstInvalid) firstInvalid = field;
        }
      });
      if (firstInvalid) {
        e.preventDefault();
        firstInvalid.focus();
        firstInvalid.scrollIntoView({ behavior: 'smooth', block: 'center' });
      }
    });
  });
})();
</script>"""

"""Static text payloads served by the MCP tools."""

PACKAGE_DESCRIPTION = (
    "MCP server exposing the Alpine.js Template Outlet documentation "
    "(search, sections, examples, installation)"
)
REPOSITORY_URL = "https://github.com/MasumNishat/template-outlet-mcp"
PLUGIN_NPM_URL = "https://www.npmjs.com/package/@masum-nishat/alpine-template-outlet"
PLUGIN_CDN_URL = (
    "https://unpkg.com/@masum-nishat/alpine-template-outlet@latest"
    "/dist/alpine-template-outlet.cdn.min.js"
)

INSTALLATION_GUIDE = f"""# Alpine.js Template Outlet - Installation Guide

## Installation Methods

### Option 1: NPM (Recommended for Build Tools)

```bash
npm install @masum-nishat/alpine-template-outlet
```

```javascript
import Alpine from 'alpinejs';
import templateOutlet from '@masum-nishat/alpine-template-outlet';

Alpine.plugin(templateOutlet);
Alpine.start();
```

### Option 2: CDN via unpkg.com

```html
<!-- Plugin loads WITHOUT defer, BEFORE Alpine -->
<script src="{PLUGIN_CDN_URL}"></script>
<script defer src="https://unpkg.com/alpinejs@3.x.x/dist/cdn.min.js"></script>
<script>
    document.addEventListener('alpine:init', () => {{
        if (typeof window.TemplateOutletDirective !== 'undefined') {{
            Alpine.directive('template-outlet', window.TemplateOutletDirective);
        }}
    }});
</script>
```

**CRITICAL REQUIREMENTS:**

1. The plugin script loads **without** `defer`, before Alpine.js.
2. With the CDN build the directive must be registered manually in `alpine:init`.

## Package Links

- **NPM Package**: {PLUGIN_NPM_URL}
- **GitHub Repository**: https://github.com/MasumNishat/template-outlet

## Need More Examples?

Use the `get-example` tool for complete implementations (`simple-tree`,
`nested-menu`, `interactive-tree`, `file-system`, `comment-thread`,
`org-chart`) and the `search-docs` tool to find API details or
troubleshooting notes."""

def build_collector_script(
    default_report_endpoint: str = "/hardware/report",
    battery_timeout_ms: int = 500,
) -> str:
    return f"""(function(global) {{
  function read(getter) {{
    try {{
      const value = getter();
      return value === undefined ? null : value;
    }} catch (_) {{
      return null;
    }}
  }}

  function encodeTime(value) {{
    if (typeof value !== 'number' || isNaN(value)) return null;
    return isFinite(value) ? value : 'Infinity';
  }}

  function batteryFrom(source, battery) {{
    if (!battery) return null;
    return {{
      source: source,
      charging: !!battery.charging,
      level: battery.level,
      charging_time: encodeTime(battery.chargingTime),
      discharging_time: encodeTime(battery.dischargingTime)
    }};
  }}

  function withTimeout(promise, timeoutMs) {{
    return new Promise((resolve) => {{
      const timer = setTimeout(() => resolve(null), timeoutMs);
      promise.then(
        (value) => {{ clearTimeout(timer); resolve(value); }},
        () => {{ clearTimeout(timer); resolve(null); }}
      );
    }});
  }}

  async function getBatteryInfo(timeoutMs) {{
    if (typeof navigator.getBattery === 'function') {{
      try {{
        const battery = await withTimeout(navigator.getBattery(), timeoutMs);
        return batteryFrom('getBattery', battery);
      }} catch (_) {{
        return null;
      }}
    }}
    const legacy = ['battery', 'webkitBattery', 'mozBattery'];
    for (const source of legacy) {{
      const battery = read(() => navigator[source]);
      if (battery) return batteryFrom(source, battery);
    }}
    return null;
  }}

  function getWebGLInfo() {{
    let canvas;
    try {{
      canvas = document.createElement('canvas');
    }} catch (_) {{
      return null;
    }}
    const names = ['webgl', 'experimental-webgl'];
    for (const name of names) {{
      const gl = read(() => canvas.getContext(name));
      if (!gl) continue;
      const dbg = read(() => gl.getExtension('WEBGL_debug_renderer_info'));
      return {{
        context: name,
        debug_renderer_info: !!dbg,
        renderer: dbg ? read(() => gl.getParameter(dbg.UNMASKED_RENDERER_WEBGL)) : null,
        vendor: dbg ? read(() => gl.getParameter(dbg.UNMASKED_VENDOR_WEBGL)) : null
      }};
    }}
    return null;
  }}

  function positive(value) {{
    return typeof value === 'number' && value > 0 ? value : null;
  }}

  async function collectSnapshot(options) {{
    const opts = options || {{}};
    const timeoutMs = opts.batteryTimeoutMs || {battery_timeout_ms};
    return {{
      session_id: opts.sessionId || null,
      navigator: {{
        user_agent: read(() => navigator.userAgent) || '',
        platform: read(() => navigator.platform) || null,
        cpu_class: read(() => navigator.cpuClass),
        hardware_concurrency: positive(read(() => navigator.hardwareConcurrency)),
        device_memory: read(() => navigator.deviceMemory)
      }},
      screen: {{
        width: read(() => global.screen.width),
        height: read(() => global.screen.height),
        color_depth: read(() => global.screen.colorDepth)
      }},
      webgl: getWebGLInfo(),
      battery: await getBatteryInfo(timeoutMs),
      touch_events: read(() => 'ontouchstart' in document) === true,
      collected_at: new Date().toISOString()
    }};
  }}

  async function report(apiUrl, options) {{
    const endpoint = apiUrl || '{default_report_endpoint}';
    const snapshot = await collectSnapshot(options);
    const response = await fetch(endpoint, {{
      method: 'POST',
      headers: {{ 'Content-Type': 'application/json' }},
      body: JSON.stringify(snapshot)
    }});
    if (!response.ok) {{
      const text = await response.text();
      throw new Error('Request failed: ' + response.status + ' ' + text);
    }}
    return response.json();
  }}

  global.HardwareProfiler = {{
    collectSnapshot,
    report
  }};
}})(window);
"""


__all__ = ("build_collector_script",)

# pygame compatibility layer for Pyodide: draws on an HTML canvas.
# Installed as site-packages/pygame/__init__.py inside the demo page.
import math as _math

from js import document as _document, performance as _performance
from pyodide.ffi import create_proxy as _create_proxy

QUIT = 256
KEYDOWN = 768
KEYUP = 769
MOUSEMOTION = 1024
MOUSEBUTTONDOWN = 1025
MOUSEBUTTONUP = 1026
USEREVENT = 32866

K_BACKSPACE = 8; K_TAB = 9; K_RETURN = 13; K_ESCAPE = 27; K_SPACE = 32
K_UP = 273; K_DOWN = 274; K_RIGHT = 275; K_LEFT = 276
K_LSHIFT = 304; K_RSHIFT = 303; K_LCTRL = 306; K_RCTRL = 305
for _i, _ch in enumerate("abcdefghijklmnopqrstuvwxyz"):
    globals()["K_" + _ch] = 97 + _i
for _i in range(10):
    globals()["K_%d" % _i] = 48 + _i

SRCALPHA = 0x00010000
FULLSCREEN = RESIZABLE = NOFRAME = DOUBLEBUF = HWSURFACE = SCALED = 0

# Browser keyCode -> pygame key constant, where they differ
_KEYCODE_MAP = {37: K_LEFT, 38: K_UP, 39: K_RIGHT, 40: K_DOWN, 16: K_LSHIFT, 17: K_LCTRL}

# A synchronous game loop never yields to the browser; after this many frames
# the event queue reports QUIT so the page regains control.
MAX_FRAMES = 1800

_NAMED_COLORS = {
    "black": (0, 0, 0), "white": (255, 255, 255), "red": (255, 0, 0),
    "green": (0, 128, 0), "lime": (0, 255, 0), "blue": (0, 0, 255),
    "yellow": (255, 255, 0), "cyan": (0, 255, 255), "magenta": (255, 0, 255),
    "orange": (255, 165, 0), "purple": (128, 0, 128), "pink": (255, 192, 203),
    "gray": (128, 128, 128), "grey": (128, 128, 128), "brown": (165, 42, 42),
    "navy": (0, 0, 128),
}


def _rgba(value):
    if isinstance(value, Color):
        return value.r, value.g, value.b, value.a
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _NAMED_COLORS:
            return _NAMED_COLORS[text] + (255,)
        text = text.lstrip("#")
        if len(text) in (6, 8):
            parts = [int(text[i:i + 2], 16) for i in range(0, len(text), 2)]
            return tuple(parts) + ((255,) if len(parts) == 3 else ())
        return 0, 0, 0, 255
    if isinstance(value, int):
        return value, value, value, 255
    r, g, b = value[0], value[1], value[2]
    a = value[3] if len(value) > 3 else 255
    return int(r), int(g), int(b), int(a)


def _css(value):
    r, g, b, a = _rgba(value)
    if a >= 255:
        return "rgb(%d,%d,%d)" % (r, g, b)
    return "rgba(%d,%d,%d,%.3f)" % (r, g, b, a / 255)


def _xywh(rect):
    if isinstance(rect, Rect):
        return rect.x, rect.y, rect.w, rect.h
    if len(rect) == 2:
        return rect[0][0], rect[0][1], rect[1][0], rect[1][1]
    return rect[0], rect[1], rect[2], rect[3]


class Color:
    def __init__(self, *args):
        value = args[0] if len(args) == 1 else args
        self.r, self.g, self.b, self.a = _rgba(value)

    def __iter__(self):
        return iter((self.r, self.g, self.b, self.a))

    def __getitem__(self, i):
        return (self.r, self.g, self.b, self.a)[i]

    def __len__(self):
        return 4

    def __eq__(self, other):
        try:
            return tuple(self) == _rgba(other)
        except (TypeError, IndexError, ValueError):
            return False

    def __repr__(self):
        return "(%d, %d, %d, %d)" % tuple(self)


class Rect:
    def __init__(self, *args):
        if len(args) == 1:
            args = tuple(args[0]) if not isinstance(args[0], Rect) else tuple(args[0])
        if len(args) == 2:
            args = (args[0][0], args[0][1], args[1][0], args[1][1])
        if len(args) != 4:
            args = (0, 0, 0, 0)
        self.x, self.y, self.w, self.h = (int(v) for v in args)

    # edges and anchors; setters move the rect, never resize it
    left = property(lambda s: s.x, lambda s, v: setattr(s, "x", int(v)))
    top = property(lambda s: s.y, lambda s, v: setattr(s, "y", int(v)))
    right = property(lambda s: s.x + s.w, lambda s, v: setattr(s, "x", int(v) - s.w))
    bottom = property(lambda s: s.y + s.h, lambda s, v: setattr(s, "y", int(v) - s.h))
    width = property(lambda s: s.w, lambda s, v: setattr(s, "w", int(v)))
    height = property(lambda s: s.h, lambda s, v: setattr(s, "h", int(v)))
    centerx = property(lambda s: s.x + s.w // 2, lambda s, v: setattr(s, "x", int(v) - s.w // 2))
    centery = property(lambda s: s.y + s.h // 2, lambda s, v: setattr(s, "y", int(v) - s.h // 2))

    @property
    def size(self):
        return self.w, self.h

    @size.setter
    def size(self, v):
        self.w, self.h = int(v[0]), int(v[1])

    def _pair(self, xname, yname):
        return getattr(self, xname), getattr(self, yname)

    def _set_pair(self, xname, yname, v):
        setattr(self, xname, v[0])
        setattr(self, yname, v[1])

    center = property(lambda s: s._pair("centerx", "centery"), lambda s, v: s._set_pair("centerx", "centery", v))
    topleft = property(lambda s: s._pair("left", "top"), lambda s, v: s._set_pair("left", "top", v))
    topright = property(lambda s: s._pair("right", "top"), lambda s, v: s._set_pair("right", "top", v))
    bottomleft = property(lambda s: s._pair("left", "bottom"), lambda s, v: s._set_pair("left", "bottom", v))
    bottomright = property(lambda s: s._pair("right", "bottom"), lambda s, v: s._set_pair("right", "bottom", v))
    midtop = property(lambda s: s._pair("centerx", "top"), lambda s, v: s._set_pair("centerx", "top", v))
    midbottom = property(lambda s: s._pair("centerx", "bottom"), lambda s, v: s._set_pair("centerx", "bottom", v))
    midleft = property(lambda s: s._pair("left", "centery"), lambda s, v: s._set_pair("left", "centery", v))
    midright = property(lambda s: s._pair("right", "centery"), lambda s, v: s._set_pair("right", "centery", v))

    def copy(self):
        return Rect(self.x, self.y, self.w, self.h)

    def move(self, dx, dy=None):
        if dy is None:
            dx, dy = dx
        return Rect(self.x + dx, self.y + dy, self.w, self.h)

    def move_ip(self, dx, dy=None):
        if dy is None:
            dx, dy = dx
        self.x += int(dx)
        self.y += int(dy)

    def inflate(self, dx, dy):
        return Rect(self.x - dx // 2, self.y - dy // 2, self.w + dx, self.h + dy)

    def inflate_ip(self, dx, dy):
        self.x, self.y, self.w, self.h = self.inflate(dx, dy)

    def colliderect(self, other):
        other = other if isinstance(other, Rect) else Rect(other)
        return (self.x < other.right and other.x < self.right
                and self.y < other.bottom and other.y < self.bottom)

    def collidepoint(self, *args):
        px, py = args[0] if len(args) == 1 else args
        return self.x <= px < self.right and self.y <= py < self.bottom

    def collidelist(self, rects):
        for i, r in enumerate(rects):
            if self.colliderect(r):
                return i
        return -1

    def contains(self, other):
        other = other if isinstance(other, Rect) else Rect(other)
        return (self.x <= other.x and self.y <= other.y
                and other.right <= self.right and other.bottom <= self.bottom)

    def clamp(self, other):
        r = self.copy()
        r.clamp_ip(other)
        return r

    def clamp_ip(self, other):
        if self.w > other.w:
            self.centerx = other.centerx
        else:
            self.x = min(max(self.x, other.x), other.right - self.w)
        if self.h > other.h:
            self.centery = other.centery
        else:
            self.y = min(max(self.y, other.y), other.bottom - self.h)

    def union(self, other):
        x, y = min(self.x, other.x), min(self.y, other.y)
        return Rect(x, y, max(self.right, other.right) - x, max(self.bottom, other.bottom) - y)

    def __iter__(self):
        return iter((self.x, self.y, self.w, self.h))

    def __getitem__(self, i):
        return (self.x, self.y, self.w, self.h)[i]

    def __len__(self):
        return 4

    def __eq__(self, other):
        try:
            return tuple(self) == tuple(Rect(other))
        except (TypeError, IndexError, ValueError):
            return False

    def __repr__(self):
        return "<rect(%d, %d, %d, %d)>" % tuple(self)


class Surface:
    def __init__(self, size, flags=0, depth=32):
        self._w, self._h = int(size[0]), int(size[1])
        self._flags = flags
        self._canvas = _document.createElement("canvas")
        self._canvas.width = self._w
        self._canvas.height = self._h
        self._ctx = self._canvas.getContext("2d")
        if not flags & SRCALPHA:
            self._ctx.fillStyle = "rgb(0,0,0)"
            self._ctx.fillRect(0, 0, self._w, self._h)

    def get_size(self):
        return self._w, self._h

    def get_width(self):
        return self._w

    def get_height(self):
        return self._h

    def get_rect(self, **kwargs):
        r = Rect(0, 0, self._w, self._h)
        for name, value in kwargs.items():
            setattr(r, name, value)
        return r

    def fill(self, color, rect=None):
        self._ctx.fillStyle = _css(color)
        x, y, w, h = _xywh(rect) if rect is not None else (0, 0, self._w, self._h)
        self._ctx.fillRect(x, y, w, h)
        return Rect(x, y, w, h)

    def blit(self, source, dest, area=None):
        dx, dy = (dest.x, dest.y) if isinstance(dest, Rect) else (dest[0], dest[1])
        if area is not None:
            sx, sy, sw, sh = _xywh(area)
            self._ctx.drawImage(source._canvas, sx, sy, sw, sh, dx, dy, sw, sh)
            return Rect(dx, dy, sw, sh)
        self._ctx.drawImage(source._canvas, dx, dy)
        return Rect(dx, dy, source._w, source._h)

    def set_at(self, pos, color):
        self._ctx.fillStyle = _css(color)
        self._ctx.fillRect(int(pos[0]), int(pos[1]), 1, 1)

    def get_at(self, pos):
        data = self._ctx.getImageData(int(pos[0]), int(pos[1]), 1, 1).data
        return Color(data[0], data[1], data[2], data[3])

    def set_alpha(self, alpha):
        self._canvas.style.opacity = str((alpha or 255) / 255)

    def set_colorkey(self, color):
        pass

    def convert(self, *args):
        return self

    def convert_alpha(self, *args):
        return self

    def copy(self):
        clone = Surface((self._w, self._h), SRCALPHA)
        clone._ctx.drawImage(self._canvas, 0, 0)
        return clone

    def subsurface(self, rect):
        x, y, w, h = _xywh(rect)
        sub = Surface((w, h), SRCALPHA)
        sub._ctx.drawImage(self._canvas, x, y, w, h, 0, 0, w, h)
        return sub


class _Event:
    def __init__(self, type, **attrs):
        self.type = type
        self.__dict__.update(attrs)

    def __repr__(self):
        return "<Event(%d %r)>" % (self.type, {k: v for k, v in self.__dict__.items() if k != "type"})


Event = _Event


class _EventQueue:
    def __init__(self):
        self._queue = []
        self._frames = 0

    def _tick_frame(self):
        self._frames += 1
        return self._frames >= MAX_FRAMES

    def get(self, *args, **kwargs):
        events, self._queue = self._queue, []
        if self._tick_frame():
            events.append(_Event(QUIT))
        return events

    def poll(self):
        if self._queue:
            return self._queue.pop(0)
        if self._tick_frame():
            return _Event(QUIT)
        return _Event(0)

    def wait(self):
        return self.poll()

    def peek(self, *args):
        return bool(self._queue)

    def post(self, ev):
        self._queue.append(ev)

    def clear(self, *args):
        self._queue = []

    def pump(self):
        pass

    def set_allowed(self, *args):
        pass

    def set_blocked(self, *args):
        pass

    Event = _Event


event = _EventQueue()


class _Keyboard:
    def __init__(self):
        self._pressed = set()

    def get_pressed(self):
        pressed = frozenset(self._pressed)

        class _State:
            def __getitem__(self, k):
                return k in pressed
        return _State()

    def get_mods(self):
        return 0

    def set_repeat(self, *args):
        pass

    def get_focused(self):
        return True

    def name(self, k):
        return chr(k) if 32 <= k < 127 else str(k)


key = _Keyboard()


class _Mouse:
    def __init__(self):
        self._pos = (0, 0)
        self._buttons = [False, False, False]

    def get_pos(self):
        return self._pos

    def get_pressed(self, num_buttons=3):
        return tuple(self._buttons[:num_buttons])

    def set_pos(self, pos):
        self._pos = (int(pos[0]), int(pos[1]))

    def set_visible(self, visible):
        return True

    def get_focused(self):
        return True


mouse = _Mouse()


class _Display:
    def __init__(self):
        self._surface = None
        self._canvas = None
        self._ctx = None
        self._caption = "pygame window"
        self._proxies = []

    def set_mode(self, size=(640, 480), flags=0, depth=32, *args, **kwargs):
        w, h = int(size[0]), int(size[1])
        container = _document.getElementById("canvas-container")
        container.style.display = "flex"
        self._canvas = _document.createElement("canvas")
        self._canvas.width = w
        self._canvas.height = h
        self._canvas.tabIndex = 0
        container.appendChild(self._canvas)
        self._ctx = self._canvas.getContext("2d")
        self._surface = Surface((w, h))
        self._listen(_document, "keydown", self._on_key(KEYDOWN))
        self._listen(_document, "keyup", self._on_key(KEYUP))
        self._listen(self._canvas, "mousedown", self._on_button(MOUSEBUTTONDOWN))
        self._listen(self._canvas, "mouseup", self._on_button(MOUSEBUTTONUP))
        self._listen(self._canvas, "mousemove", self._on_motion)
        return self._surface

    def _listen(self, target, name, handler):
        proxy = _create_proxy(handler)
        self._proxies.append(proxy)
        target.addEventListener(name, proxy)

    def _local_pos(self, e):
        box = self._canvas.getBoundingClientRect()
        return int(e.clientX - box.left), int(e.clientY - box.top)

    def _on_key(self, etype):
        def handler(e):
            code = _KEYCODE_MAP.get(e.keyCode, e.keyCode)
            if 65 <= code <= 90:
                code += 32
            if etype == KEYDOWN:
                key._pressed.add(code)
                event.post(_Event(KEYDOWN, key=code, unicode=e.key if len(e.key) == 1 else "", mod=0))
            else:
                key._pressed.discard(code)
                event.post(_Event(KEYUP, key=code, mod=0))
        return handler

    def _on_button(self, etype):
        def handler(e):
            pos = self._local_pos(e)
            index = min(int(e.button), 2)
            mouse._buttons[index] = etype == MOUSEBUTTONDOWN
            event.post(_Event(etype, pos=pos, button=int(e.button) + 1))
        return handler

    def _on_motion(self, e):
        pos = self._local_pos(e)
        rel = (pos[0] - mouse._pos[0], pos[1] - mouse._pos[1])
        mouse._pos = pos
        event.post(_Event(MOUSEMOTION, pos=pos, rel=rel, buttons=tuple(int(b) for b in mouse._buttons)))

    def flip(self):
        if self._ctx is not None and self._surface is not None:
            self._ctx.drawImage(self._surface._canvas, 0, 0)

    def update(self, *args):
        self.flip()

    def set_caption(self, title, icontitle=""):
        self._caption = title
        _document.title = title

    def get_caption(self):
        return self._caption, self._caption

    def get_surface(self):
        return self._surface

    def set_icon(self, surface):
        pass

    def init(self):
        pass

    def quit(self):
        pass


display = _Display()


class _Draw:
    def _finish(self, ctx, color, width):
        if width == 0:
            ctx.fillStyle = _css(color)
            ctx.fill()
        else:
            ctx.strokeStyle = _css(color)
            ctx.lineWidth = width
            ctx.stroke()

    def rect(self, surface, color, rect, width=0, border_radius=0):
        x, y, w, h = _xywh(rect)
        ctx = surface._ctx
        if border_radius > 0:
            r = min(border_radius, w // 2, h // 2)
            ctx.beginPath()
            ctx.moveTo(x + r, y)
            ctx.arcTo(x + w, y, x + w, y + h, r)
            ctx.arcTo(x + w, y + h, x, y + h, r)
            ctx.arcTo(x, y + h, x, y, r)
            ctx.arcTo(x, y, x + w, y, r)
            ctx.closePath()
            self._finish(ctx, color, width)
        elif width == 0:
            ctx.fillStyle = _css(color)
            ctx.fillRect(x, y, w, h)
        else:
            ctx.strokeStyle = _css(color)
            ctx.lineWidth = width
            ctx.strokeRect(x + width / 2, y + width / 2, w - width, h - width)
        return Rect(x, y, w, h)

    def circle(self, surface, color, center, radius, width=0):
        cx, cy, r = int(center[0]), int(center[1]), int(radius)
        ctx = surface._ctx
        ctx.beginPath()
        ctx.arc(cx, cy, r, 0, 2 * _math.pi)
        self._finish(ctx, color, width)
        return Rect(cx - r, cy - r, 2 * r, 2 * r)

    def ellipse(self, surface, color, rect, width=0):
        x, y, w, h = _xywh(rect)
        ctx = surface._ctx
        ctx.beginPath()
        ctx.ellipse(x + w / 2, y + h / 2, w / 2, h / 2, 0, 0, 2 * _math.pi)
        self._finish(ctx, color, width)
        return Rect(x, y, w, h)

    def arc(self, surface, color, rect, start_angle, stop_angle, width=1):
        x, y, w, h = _xywh(rect)
        ctx = surface._ctx
        ctx.beginPath()
        # pygame angles run counter-clockwise with y pointing down
        ctx.ellipse(x + w / 2, y + h / 2, w / 2, h / 2, 0, -start_angle, -stop_angle, True)
        ctx.strokeStyle = _css(color)
        ctx.lineWidth = width
        ctx.stroke()
        return Rect(x, y, w, h)

    def _path(self, ctx, points, closed):
        ctx.beginPath()
        ctx.moveTo(points[0][0], points[0][1])
        for p in points[1:]:
            ctx.lineTo(p[0], p[1])
        if closed:
            ctx.closePath()

    def _bounds(self, points):
        xs = [p[0] for p in points]
        ys = [p[1] for p in points]
        return Rect(min(xs), min(ys), max(xs) - min(xs) + 1, max(ys) - min(ys) + 1)

    def line(self, surface, color, start, end, width=1):
        return self.lines(surface, color, False, [start, end], width)

    def lines(self, surface, color, closed, points, width=1):
        if len(points) < 2:
            return Rect(0, 0, 0, 0)
        ctx = surface._ctx
        self._path(ctx, points, closed)
        ctx.lineCap = "round"
        ctx.strokeStyle = _css(color)
        ctx.lineWidth = width
        ctx.stroke()
        return self._bounds(points)

    def aaline(self, surface, color, start, end, blend=1):
        return self.line(surface, color, start, end, 1)

    def aalines(self, surface, color, closed, points, blend=1):
        return self.lines(surface, color, closed, points, 1)

    def polygon(self, surface, color, points, width=0):
        if len(points) < 3:
            return Rect(0, 0, 0, 0)
        self._path(surface._ctx, points, True)
        self._finish(surface._ctx, color, width)
        return self._bounds(points)


draw = _Draw()


class Font:
    def __init__(self, path=None, size=24, bold=False, italic=False):
        self._size = int(size)
        self._bold = bold
        self._italic = italic

    def _css_font(self):
        style = ("italic " if self._italic else "") + ("bold " if self._bold else "")
        return "%s%dpx sans-serif" % (style, self._size)

    def size(self, text):
        ctx = _document.createElement("canvas").getContext("2d")
        ctx.font = self._css_font()
        return int(ctx.measureText(str(text)).width) + 4, self.get_height()

    def render(self, text, antialias=True, color=(255, 255, 255), background=None):
        surf = Surface(self.size(text), SRCALPHA)
        if background is not None:
            surf.fill(background)
        ctx = surf._ctx
        ctx.font = self._css_font()
        ctx.fillStyle = _css(color)
        ctx.textBaseline = "top"
        ctx.fillText(str(text), 2, 2)
        return surf

    def get_height(self):
        return int(self._size * 1.4) + 4

    def get_linesize(self):
        return self.get_height()

    def set_bold(self, value):
        self._bold = bool(value)

    def set_italic(self, value):
        self._italic = bool(value)


class _FontModule:
    Font = Font

    def init(self):
        pass

    def quit(self):
        pass

    def get_init(self):
        return True

    def SysFont(self, name, size, bold=False, italic=False):
        return Font(None, size, bold=bold, italic=italic)

    def get_fonts(self):
        return ["sans-serif", "serif", "monospace"]


font = _FontModule()


class Clock:
    def __init__(self):
        self._last = _performance.now()
        self._dt = 0

    def tick(self, framerate=0):
        # cannot sleep without blocking the page; report elapsed time only
        now = _performance.now()
        self._dt = now - self._last
        self._last = now
        return int(self._dt)

    tick_busy_loop = tick

    def get_time(self):
        return int(self._dt)

    def get_rawtime(self):
        return int(self._dt)

    def get_fps(self):
        return 1000.0 / self._dt if self._dt > 0 else 0.0


class _Time:
    Clock = Clock

    def get_ticks(self):
        return int(_performance.now())

    def delay(self, ms):
        return int(ms)

    def wait(self, ms):
        return int(ms)

    def set_timer(self, event_type, millis, loops=0):
        pass


time = _Time()


class _Transform:
    def scale(self, surface, size):
        w, h = int(size[0]), int(size[1])
        out = Surface((w, h), SRCALPHA)
        out._ctx.drawImage(surface._canvas, 0, 0, w, h)
        return out

    smoothscale = scale

    def scale2x(self, surface):
        return self.scale(surface, (surface._w * 2, surface._h * 2))

    def rotozoom(self, surface, angle, scale):
        rad = _math.radians(angle)
        w, h = surface._w * abs(scale), surface._h * abs(scale)
        nw = int(abs(w * _math.cos(rad)) + abs(h * _math.sin(rad)))
        nh = int(abs(w * _math.sin(rad)) + abs(h * _math.cos(rad)))
        out = Surface((nw, nh), SRCALPHA)
        ctx = out._ctx
        ctx.save()
        ctx.translate(nw / 2, nh / 2)
        ctx.rotate(-rad)
        ctx.scale(abs(scale), abs(scale))
        ctx.drawImage(surface._canvas, -surface._w / 2, -surface._h / 2)
        ctx.restore()
        return out

    def rotate(self, surface, angle):
        return self.rotozoom(surface, angle, 1)

    def flip(self, surface, flip_x, flip_y):
        out = Surface((surface._w, surface._h), SRCALPHA)
        ctx = out._ctx
        ctx.save()
        ctx.scale(-1 if flip_x else 1, -1 if flip_y else 1)
        ctx.drawImage(surface._canvas, -surface._w if flip_x else 0, -surface._h if flip_y else 0)
        ctx.restore()
        return out


transform = _Transform()


class _Image:
    def load(self, path):
        # no file system access from the sandbox; return a labelled placeholder
        placeholder = Surface((64, 64))
        placeholder.fill((68, 68, 68))
        placeholder._ctx.fillStyle = "#aaa"
        placeholder._ctx.font = "10px sans-serif"
        placeholder._ctx.fillText("img", 22, 36)
        return placeholder

    def save(self, surface, path):
        pass


image = _Image()


class _Silent:
    """Accepts any call and returns itself; stands in for audio objects."""

    def __call__(self, *args, **kwargs):
        return self

    def __getattr__(self, name):
        return self

    def __bool__(self):
        return False


class _Mixer:
    music = _Silent()

    def init(self, *args, **kwargs):
        pass

    def pre_init(self, *args, **kwargs):
        pass

    def quit(self):
        pass

    def get_init(self):
        return True

    def set_num_channels(self, count):
        pass

    def Sound(self, *args, **kwargs):
        return _Silent()

    def Channel(self, *args, **kwargs):
        return _Silent()


mixer = _Mixer()


class Vector2:
    def __init__(self, x=0.0, y=None):
        if y is None:
            if isinstance(x, (int, float)):
                y = x
            else:
                x, y = x[0], x[1]
        self.x, self.y = float(x), float(y)

    def __add__(self, o):
        return Vector2(self.x + o[0], self.y + o[1])

    __radd__ = __add__

    def __sub__(self, o):
        return Vector2(self.x - o[0], self.y - o[1])

    def __mul__(self, o):
        if isinstance(o, (int, float)):
            return Vector2(self.x * o, self.y * o)
        return self.dot(o)

    __rmul__ = __mul__

    def __truediv__(self, s):
        return Vector2(self.x / s, self.y / s)

    def __neg__(self):
        return Vector2(-self.x, -self.y)

    def __eq__(self, o):
        try:
            return self.x == o[0] and self.y == o[1]
        except (TypeError, IndexError):
            return False

    def __iter__(self):
        return iter((self.x, self.y))

    def __getitem__(self, i):
        return (self.x, self.y)[i]

    def __len__(self):
        return 2

    def __repr__(self):
        return "<Vector2(%g, %g)>" % (self.x, self.y)

    def dot(self, o):
        return self.x * o[0] + self.y * o[1]

    def cross(self, o):
        return self.x * o[1] - self.y * o[0]

    def length(self):
        return _math.hypot(self.x, self.y)

    magnitude = length

    def length_squared(self):
        return self.x * self.x + self.y * self.y

    def normalize(self):
        n = self.length()
        return Vector2(self.x / n, self.y / n) if n else Vector2(0, 0)

    def normalize_ip(self):
        self.x, self.y = self.normalize()

    def scale_to_length(self, length):
        self.x, self.y = self.normalize() * length

    def rotate(self, angle):
        rad = _math.radians(angle)
        c, s = _math.cos(rad), _math.sin(rad)
        return Vector2(self.x * c - self.y * s, self.x * s + self.y * c)

    def distance_to(self, o):
        return _math.hypot(self.x - o[0], self.y - o[1])

    def angle_to(self, o):
        return _math.degrees(_math.atan2(o[1], o[0]) - _math.atan2(self.y, self.x))

    def lerp(self, o, t):
        return Vector2(self.x + (o[0] - self.x) * t, self.y + (o[1] - self.y) * t)

    def copy(self):
        return Vector2(self.x, self.y)


class _MathModule:
    Vector2 = Vector2


math = _MathModule()


class Sprite:
    def __init__(self, *groups):
        self.image = None
        self.rect = Rect(0, 0, 0, 0)
        self._groups = set()
        self.add(*groups)

    def add(self, *groups):
        for g in groups:
            g.add(self)

    def remove(self, *groups):
        for g in groups:
            g.remove(self)

    def update(self, *args, **kwargs):
        pass

    def kill(self):
        for g in list(self._groups):
            g.remove(self)

    def alive(self):
        return bool(self._groups)

    def groups(self):
        return list(self._groups)


class Group:
    def __init__(self, *sprites):
        self._sprites = []
        self.add(*sprites)

    def add(self, *sprites):
        for s in sprites:
            if s not in self._sprites:
                self._sprites.append(s)
                s._groups.add(self)

    def remove(self, *sprites):
        for s in sprites:
            if s in self._sprites:
                self._sprites.remove(s)
                s._groups.discard(self)

    def has(self, *sprites):
        return all(s in self._sprites for s in sprites)

    def sprites(self):
        return list(self._sprites)

    def update(self, *args, **kwargs):
        for s in self.sprites():
            s.update(*args, **kwargs)

    def draw(self, surface):
        for s in self._sprites:
            if s.image is not None:
                surface.blit(s.image, s.rect)

    def empty(self):
        self.remove(*self.sprites())

    def __len__(self):
        return len(self._sprites)

    def __iter__(self):
        return iter(self.sprites())

    def __contains__(self, s):
        return s in self._sprites

    def __bool__(self):
        return bool(self._sprites)


def _collide_rect(a, b):
    return a.rect.colliderect(b.rect)


def _spritecollide(sprite, group, dokill, collided=None):
    test = collided or _collide_rect
    hits = [s for s in group.sprites() if test(sprite, s)]
    if dokill:
        for s in hits:
            s.kill()
    return hits


def _spritecollideany(sprite, group, collided=None):
    test = collided or _collide_rect
    for s in group.sprites():
        if test(sprite, s):
            return s
    return None


def _groupcollide(group_a, group_b, dokill_a, dokill_b, collided=None):
    result = {}
    for a in group_a.sprites():
        hits = _spritecollide(a, group_b, dokill_b, collided)
        if hits:
            result[a] = hits
            if dokill_a:
                a.kill()
    return result


class _SpriteModule:
    Sprite = Sprite
    Group = Group
    GroupSingle = Group
    RenderPlain = Group
    RenderUpdates = Group
    collide_rect = staticmethod(_collide_rect)
    spritecollide = staticmethod(_spritecollide)
    spritecollideany = staticmethod(_spritecollideany)
    groupcollide = staticmethod(_groupcollide)


sprite = _SpriteModule()

_initialized = False


def init():
    global _initialized
    _initialized = True
    return 6, 0


def quit():
    global _initialized
    _initialized = False


def get_init():
    return _initialized


def get_error():
    return ""


ver = "2.5.0"

"""
Go standard library package set.

The bundled set corresponds to `go list std` for Go 1.22 with internal and
vendored packages removed. A different toolchain's list can be loaded from
a file with load_stdlib().
"""

from __future__ import annotations

from pathlib import Path
from typing import FrozenSet, Iterable

from .errors import ConfigError, PathLike

GO_STDLIB: FrozenSet[str] = frozenset({
    "archive/tar", "archive/zip",
    "bufio", "builtin", "bytes",
    "cmp",
    "compress/bzip2", "compress/flate", "compress/gzip", "compress/lzw", "compress/zlib",
    "container/heap", "container/list", "container/ring",
    "context",
    "crypto", "crypto/aes", "crypto/cipher", "crypto/des", "crypto/dsa", "crypto/ecdh",
    "crypto/ecdsa", "crypto/ed25519", "crypto/elliptic", "crypto/hmac", "crypto/md5",
    "crypto/rand", "crypto/rc4", "crypto/rsa", "crypto/sha1", "crypto/sha256",
    "crypto/sha512", "crypto/subtle", "crypto/tls", "crypto/x509", "crypto/x509/pkix",
    "database/sql", "database/sql/driver",
    "debug/buildinfo", "debug/dwarf", "debug/elf", "debug/gosym", "debug/macho",
    "debug/pe", "debug/plan9obj",
    "embed",
    "encoding", "encoding/ascii85", "encoding/asn1", "encoding/base32", "encoding/base64",
    "encoding/binary", "encoding/csv", "encoding/gob", "encoding/hex", "encoding/json",
    "encoding/pem", "encoding/xml",
    "errors",
    "expvar",
    "flag",
    "fmt",
    "go/ast", "go/build", "go/build/constraint", "go/constant", "go/doc", "go/doc/comment",
    "go/format", "go/importer", "go/parser", "go/printer", "go/scanner", "go/token",
    "go/types", "go/version",
    "hash", "hash/adler32", "hash/crc32", "hash/crc64", "hash/fnv", "hash/maphash",
    "html", "html/template",
    "image", "image/color", "image/color/palette", "image/draw", "image/gif",
    "image/jpeg", "image/png",
    "index/suffixarray",
    "io", "io/fs", "io/ioutil",
    "log", "log/slog", "log/syslog",
    "maps",
    "math", "math/big", "math/bits", "math/cmplx", "math/rand", "math/rand/v2",
    "mime", "mime/multipart", "mime/quotedprintable",
    "net", "net/http", "net/http/cgi", "net/http/cookiejar", "net/http/fcgi",
    "net/http/httptest", "net/http/httptrace", "net/http/httputil", "net/http/pprof",
    "net/mail", "net/netip", "net/rpc", "net/rpc/jsonrpc", "net/smtp", "net/textproto",
    "net/url",
    "os", "os/exec", "os/signal", "os/user",
    "path", "path/filepath",
    "plugin",
    "reflect",
    "regexp", "regexp/syntax",
    "runtime", "runtime/cgo", "runtime/coverage", "runtime/debug", "runtime/metrics",
    "runtime/pprof", "runtime/race", "runtime/trace",
    "slices",
    "sort",
    "strconv",
    "strings",
    "sync", "sync/atomic",
    "syscall", "syscall/js",
    "testing", "testing/fstest", "testing/iotest", "testing/quick", "testing/slogtest",
    "text/scanner", "text/tabwriter", "text/template", "text/template/parse",
    "time", "time/tzdata",
    "unicode", "unicode/utf16", "unicode/utf8",
    "unsafe",
    # Pseudo-package used by cgo
    "C",
})


def _is_public(pkg: str) -> bool:
    parts = pkg.split("/")
    return "internal" not in parts and "vendor" not in parts


def build_stdlib(packages: Iterable[str]) -> FrozenSet[str]:
    """Normalize an iterable of package paths into a lookup set."""
    return frozenset(p for p in (s.strip() for s in packages) if p and _is_public(p))


def load_stdlib(path: PathLike) -> FrozenSet[str]:
    """
    Load a standard library list, one package per line (e.g. `go list std > std.txt`).

    Blank lines and lines starting with '#' are ignored.
    """
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read standard library list {p}: {e}") from e
    return build_stdlib(
        line for line in text.splitlines() if not line.lstrip().startswith("#")
    )


__all__ = ["GO_STDLIB", "build_stdlib", "load_stdlib"]

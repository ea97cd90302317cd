# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Static name catalogs that are never renamed."""

JAVA_KEYWORDS: frozenset[str] = frozenset(
    {
        "abstract",
        "assert",
        "boolean",
        "break",
        "byte",
        "case",
        "catch",
        "char",
        "class",
        "const",
        "continue",
        "default",
        "do",
        "double",
        "else",
        "enum",
        "extends",
        "final",
        "finally",
        "float",
        "for",
        "goto",
        "if",
        "implements",
        "import",
        "instanceof",
        "int",
        "interface",
        "long",
        "native",
        "new",
        "package",
        "private",
        "protected",
        "public",
        "return",
        "short",
        "static",
        "strictfp",
        "super",
        "switch",
        "synchronized",
        "this",
        "throw",
        "throws",
        "transient",
        "try",
        "void",
        "volatile",
        "while",
        "true",
        "false",
        "null",
    }
)

# Top-level library types commonly referenced without qualification.
STANDARD_CLASSES: frozenset[str] = frozenset(
    {
        "System",
        "Math",
        "String",
        "StringBuilder",
        "List",
        "ArrayList",
        "Map",
        "HashMap",
        "Set",
        "HashSet",
        "Iterator",
        "Files",
        "Paths",
        "Pattern",
        "Matcher",
        "IOException",
        "StandardCharsets",
        "Object",
        "Thread",
        "Runnable",
        "Exception",
        "RuntimeException",
        "Error",
        "Throwable",
        "Boolean",
        "Byte",
        "Character",
        "Double",
        "Float",
        "Integer",
        "Long",
        "Short",
        "Void",
        "Class",
        "ClassLoader",
        "Compiler",
        "Runtime",
        "SecurityManager",
        "StackTraceElement",
        "StrictMath",
        "Process",
        "ProcessBuilder",
        "StringBuffer",
        "Appendable",
        "CharSequence",
        "Cloneable",
        "Comparable",
        "Iterable",
        "AutoCloseable",
        "Enum",
        "PrintStream",
        "BufferedReader",
        "File",
        "FileInputStream",
        "FileOutputStream",
        "InputStream",
        "OutputStream",
        "Reader",
        "Writer",
        "Console",
        "Scanner",
    }
)

# Method and member names called on library receivers.
STANDARD_METHODS: frozenset[str] = frozenset(
    {
        # printing
        "println",
        "print",
        "printf",
        "out",
        "in",
        "err",
        # strings
        "valueOf",
        "length",
        "charAt",
        "substring",
        "indexOf",
        "contains",
        "equals",
        "equalsIgnoreCase",
        "toLowerCase",
        "toUpperCase",
        "trim",
        "split",
        "replace",
        "append",
        "toString",
        "reverse",
        "delete",
        "insert",
        # collections
        "add",
        "remove",
        "get",
        "set",
        "size",
        "clear",
        "isEmpty",
        "put",
        "keySet",
        "values",
        "entrySet",
        "list",
        # math
        "abs",
        "max",
        "min",
        "sqrt",
        "pow",
        "random",
        "ceil",
        "floor",
        # files
        "readAllLines",
        "write",
        "exists",
        "isDirectory",
        # regex
        "find",
        "group",
        "matches",
        "replaceAll",
        "compile",
        "matcher",
        # lifecycle
        "main",
        "start",
        "run",
        "wait",
        "notify",
        "notifyAll",
        "clone",
        "finalize",
        "hashCode",
        "getClass",
    }
)

# Local names of the original obfuscator, excluded so it can process itself.
INTERNAL_NAMES: frozenset[str] = frozenset(
    {
        "counter",
        "code",
        "file",
        "ids",
        "rename",
        "result",
        "outFile",
        "publicClass",
        "importedClasses",
        "packageNames",
        "sortedEntries",
    }
)

# Variables declared with one of these types keep their names.
TYPED_LOCAL_MARKERS: tuple[str, ...] = (
    "Pattern",
    "Matcher",
    "File",
    "Path",
    "BufferedReader",
    "BufferedWriter",
    "FileInputStream",
    "FileOutputStream",
    "PrintStream",
    "Console",
    "Scanner",
    "Thread",
    "Runnable",
    "Process",
    "ProcessBuilder",
)

# Modifiers accepted in front of member declarations.
METHOD_MODIFIERS: tuple[str, ...] = (
    "public",
    "private",
    "protected",
    "static",
    "final",
    "abstract",
    "synchronized",
    "native",
    "strictfp",
    "transient",
    "volatile",
)
FIELD_MODIFIERS: tuple[str, ...] = (
    "public",
    "private",
    "protected",
    "static",
    "final",
    "transient",
    "volatile",
)

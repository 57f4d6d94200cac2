"""A miniature Flutter template tree carrying every placeholder token."""

from __future__ import annotations

from pathlib import Path

TEMPLATE_FILES = {
    "pubspec.yaml": (
        "name: flutter_master_template\n"
        "description: A production-ready Flutter application\n"
        "version: 1.0.0+1\n"
        "# bundle: com.example.template\n"
    ),
    "lib/main.dart": (
        "class MyApp extends StatelessWidget {\n"
        "  Widget build(BuildContext context) {\n"
        "    return MaterialApp(title: 'Flutter Master Template');\n"
        "  }\n"
        "}\n"
    ),
    "test/widget_test.dart": "void main() {}\n",
    ".gitignore": "build/\n.dart_tool/\n",
    "android/app/build.gradle": 'android {\n    defaultConfig {\n        applicationId "com.example.template"\n    }\n}\n',
    "android/app/src/main/AndroidManifest.xml": (
        '<manifest package="com.example.template">\n'
        '    <application android:label="flutter_master_template"/>\n'
        "</manifest>\n"
    ),
    "android/app/src/main/kotlin/com/example/template/MainActivity.kt": (
        "package com.example.template\n\nclass MainActivity: FlutterActivity()\n"
    ),
    "ios/Runner/Info.plist": "<key>CFBundleName</key>\n<string>flutter_master_template</string>\n",
    "ios/Runner.xcodeproj/project.pbxproj": "PRODUCT_BUNDLE_IDENTIFIER = com.example.template;\n",
}


def write_tree(root: Path, files: dict[str, str] = TEMPLATE_FILES) -> Path:
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


def snapshot(root: Path) -> dict[str, bytes]:
    """Map every file below ``root`` to its bytes."""

    return {
        path.relative_to(root).as_posix(): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }

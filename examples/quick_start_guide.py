#!/usr/bin/env python3
"""
Quick Start Guide for xmldoc-tree.

Builds a small document, reads it back with lookups and typed values, edits
it, and prints the indented and compact XML.
"""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from xmldoc_tree import DocumentOptions, XMLDocument, XMLElement, parse
from xmldoc_tree.tree import as_int


def quick_start_example():
    """Quick start example showing basic usage."""

    print("🚀 QUICK START - xmldoc-tree")
    print("=" * 30)

    # Step 1: Build a document
    print("\n📄 Step 1: Building a document")
    print("-" * 30)

    document = XMLDocument(XMLElement("animals"))
    cats = document.root.add_child("cats")
    cats.add_child("cat", "Tinna", attributes={"breed": "Siberian", "color": "lightgray"})
    cats.add_child("cat", "Rose", attributes={"breed": "Domestic", "color": "darkgray"})
    cats.add_child("cat", "Caesar", attributes={"breed": "Domestic", "color": "yellow"})
    document.root.add_child("dogs").add_child("dog", "Villy", attributes={"age": "4"})

    print(document.xml)

    # Step 2: Parse it back and navigate
    print("\n🔍 Step 2: Navigating")
    print("-" * 30)

    parsed = parse(document.xml, DocumentOptions.lenient())
    cat = parsed.root["cats.cat"]
    print(f"First cat: {cat.value}, {cat.count} cats in total")
    print(f"Domestic cats: {[c.value for c in cat.all_with_attributes({'breed': 'Domestic'})]}")
    print(f"Last cat: {cat.last.value}")
    print(f"Missing element: {parsed.root['birds']}")

    # Step 3: Typed values never raise
    print("\n🔢 Step 3: Typed values")
    print("-" * 30)

    age = parsed.root["dogs.dog"].attributes["age"]
    print(f"Dog age attribute: {age}")
    print(f"Dog name as int: {parsed.root['dogs.dog'].as_int}")
    print(f"Missing element as int: {as_int(parsed.root['birds.bird'])}")

    # Step 4: Edit and serialize
    print("\n✏️  Step 4: Editing")
    print("-" * 30)

    cat.last.remove_from_parent()
    parsed.root["dogs"].add_child("dog", "Kika & Co")
    print(parsed.root.xml_compact)


if __name__ == "__main__":
    quick_start_example()

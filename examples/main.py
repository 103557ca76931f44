#!/usr/bin/env python3
"""
Example script demonstrating basic usage of jsontypegen.

Run from the project root after installing the package:
    python examples/main.py examples/users.json
"""

from jsontypegen import JsonSampleStream, OutputFormat, TypeGenerationOptions, generate_types
import sys

def main():
    file_path = "examples/users.json"
    if len(sys.argv) > 1:
        file_path = sys.argv[1]
        
    print(f"Loading {file_path}...")
    data = JsonSampleStream(file_path)
    
    # Scan and print schema
    print("Scanning schema...")
    data.print_schema()
    
    # Generate every format from the same schema
    schema = data.schema_cache
    for output_format in OutputFormat:
        options = TypeGenerationOptions(format=output_format, root_type_name="User")
        generated = generate_types(schema, options)
        print(f"\n# {output_format.value} (dependencies: {', '.join(generated.dependencies) or 'none'})")
        print(generated.content)

    # Or write one format straight to a file
    # data.generate_type_definitions("user_models.py", TypeGenerationOptions(format="pydantic-v2", root_type_name="User"))


if __name__ == '__main__':
    main()

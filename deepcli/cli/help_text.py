HELP_TEMPLATE = """
{prog} - terminal development assistant backed by DeepSeek Chat.

Basic usage:
  {prog} -i "<query>" [options]
  {prog} -i "<query>" -f <file>
  cat <file> | {prog} -i "<query>"

Description:
  Talk to DeepSeek Chat from the terminal. Useful for code analysis,
  technical assistance and content generation.

Main arguments:
  -i, --instruction <text>    Query/prompt for the model (required, or pass it as plain words)
  -f, --file <file>           File to analyze (optional)
  -o, --output <file>         Save the response to a file (optional)

Model options:
  -t, --temperature <0.0-2.0> Controls randomness:
                              0.0 = precise/factual
                              0.7 = balanced (default)
                              1.5+ = creative/risky
  -m, --maxtokens <number>    Maximum response length (default: 2048)

Input modes:
  1. Direct query:
     $ {prog} -i "How do I reverse an array in Python"

  2. File analysis:
     $ {prog} -i "Explain this code" -f program.js

  3. Unix pipeline:
     $ git diff | {prog} -i "Explain the changes"

Detailed examples:
  # Code analysis with output to a file
  $ {prog} -i "Find bugs" -f code.py -o bugs.txt

  # Strict refactoring
  $ {prog} -i "Refactor this code" -t 0.3 -m 4096 -f legacy.rs

  # Documentation generation
  $ {prog} -i "Generate Markdown documentation" -f module.go

Configuration:
  The API key is read from:
  * Environment variable: $ export DEEPSEEK_API_KEY="your_key"
  * .env file:            $ echo 'DEEPSEEK_API_KEY=your_key' > .env
  DEEPCLI_TIMEOUT sets the request timeout in seconds (default 300, 0 disables it).

Advanced options:
  -raw, --raw           Print the raw response body (for pipeline processing)
  -v, --verbose         Show detailed logs on stderr
  -h, --help            Show this help

  Long options also accept a single dash (-instruction, -file, -output,
  -temperature, -maxtokens, -raw, -verbose, -help).

Tips:
  * For complex code, use --maxtokens 4096
  * Combine with jq to process the JSON: -raw | jq '.choices[0].message.content'
  * Use --temperature 1.2 for creative brainstorming
"""


def format_help(prog: str) -> str:
    return HELP_TEMPLATE.format(prog=prog)

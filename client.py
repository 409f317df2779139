import os, json, sys, requests, openai, readline
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

MCP_URL = os.getenv("TIMECHIMP_MCP_URL", "http://localhost:8000")

SYSTEM_PROMPT = (
    "You are an assistant with access to the TimeChimp time-tracking API. "
    "Use the tools to look up projects, customers, time entries, expenses and "
    "mileage. Dates are YYYY-MM-DD. Ask before guessing IDs."
)

# Tools that change data in TimeChimp; everything else is read-only.
MUTATING_PREFIXES = ("create_", "update_", "delete_")


def to_openai_tools(tools: list[dict]) -> list[dict]:
    """Convert the server's tool listing to OpenAI function tools."""
    return [
        {
            "type": "function",
            "function": {
                "name": t["name"],
                "description": t["description"],
                "parameters": t["inputSchema"],
            },
        }
        for t in tools
    ]


def is_mutating(name: str) -> bool:
    return name.startswith(MUTATING_PREFIXES)


def call_tool(name: str, args: dict) -> dict:
    r = requests.post(f"{MCP_URL}/tools/{name}", json=args, timeout=60)
    r.raise_for_status()
    return r.json()


def confirm(name: str, args: dict) -> bool:
    print("\n" + "="*60)
    print(f"📋 CONFIRM {name}")
    print("="*60)
    for key, value in args.items():
        print(f"  {key}: {json.dumps(value)}")
    print("="*60)
    answer = input("Proceed? (yes/no): ").strip().lower()
    return answer in ['yes', 'y', 'confirm', 'ok', 'proceed']


def chat(client, functions, messages, user_input: str):
    messages.append({"role": "user", "content": user_input})
    resp = client.chat.completions.create(
        model="gpt-4o-mini",
        messages=messages,
        tools=functions,
        tool_choice="auto"
    )
    msg = resp.choices[0].message
    messages.append(msg)

    if not msg.tool_calls:
        print(msg.content)
        return

    for tool_call in msg.tool_calls:
        name = tool_call.function.name
        args = json.loads(tool_call.function.arguments or "{}")
        print(f"↳ OpenAI called {name} with {args}")

        if is_mutating(name) and not confirm(name, args):
            print("❌ Cancelled.")
            content = json.dumps({"isError": True, "content": [{"type": "text", "text": "Cancelled by user"}]})
        else:
            try:
                res = call_tool(name, args)
                text = res["content"][0]["text"]
                print(("❌ " if res["isError"] else "✅ ") + text[:2000])
                content = json.dumps(res)
            except requests.RequestException as e:
                print(f"❌ MCP error: {e}")
                content = json.dumps({"isError": True, "content": [{"type": "text", "text": str(e)}]})

        messages.append({"role": "tool",
                         "tool_call_id": tool_call.id,
                         "content": content})

    # Let the model summarise the tool output.
    follow_up = client.chat.completions.create(model="gpt-4o-mini", messages=messages)
    reply = follow_up.choices[0].message
    messages.append(reply)
    print(reply.content)


def main():
    # Check for OpenAI API key
    if not os.getenv("OPENAI_API_KEY"):
        print("❌ OpenAI API key not found!")
        print("Please set your OpenAI API key in your .env file:")
        print("OPENAI_API_KEY=your-api-key-here")
        sys.exit(1)

    tools = requests.get(f"{MCP_URL}/tools", timeout=10).json()["tools"]
    functions = to_openai_tools(tools)
    client = openai.OpenAI()
    messages = [{"role": "system", "content": SYSTEM_PROMPT}]
    try:
        while True:
            chat(client, functions, messages, input("You: "))
    except (EOFError, KeyboardInterrupt):
        sys.exit()


if __name__ == "__main__":
    main()

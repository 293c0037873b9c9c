#!/usr/bin/env python3

from flask import Flask, request, jsonify
import random

app = Flask(__name__)

# HTML templates
HOME_PAGE = '''<!DOCTYPE html>
<html>
<head>
    <title>Test Server</title>
</head>
<body>
    <h1>Test Server</h1>
    <p>This is a local server for testing the httpget client</p>
    <p><a href="/d20">Roll a d20</a></p>
</body>
</html>
'''

@app.route('/')
def home():
    return HOME_PAGE

@app.route('/d20')
def d20():
    return f"{random.randint(1, 20)}\n", 200, {'Content-Type': 'text/plain'}

@app.route('/echo/<path:subpath>')
def echo(subpath):
    return f"/echo/{subpath}\n", 200, {'Content-Type': 'text/plain'}

@app.route('/headers')
def headers():
    # Request headers as the client sent them
    return jsonify({
        'host': request.headers.get('Host'),
        'connection': request.headers.get('Connection'),
        'path': request.full_path.rstrip('?')
    })

if __name__ == '__main__':
    print("Starting test server on http://localhost:3490")
    print("Try: httpget localhost:3490/d20")
    app.run(host='0.0.0.0', port=3490, debug=True)

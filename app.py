#!/usr/bin/env python3
"""
Flask web front end for the unscrambler.
"""

from flask import Flask, request, jsonify
from unscrambler.main import build_index
from unscrambler.normalizer import normalize
from unscrambler.paths import DICTIONARY_PATH, TABLE_SIZE

app = Flask(__name__)

# Global index instance, built once and only read afterwards
index = None


def initialize_index(prebuilt=None, path=DICTIONARY_PATH, table_size=TABLE_SIZE):
    """Initialize the anagram index (or install a prebuilt one)."""
    global index
    if prebuilt is not None:
        index = prebuilt
        return index
    print("Initializing anagram index...")
    index = build_index(path, table_size)
    print("Anagram index initialized successfully")
    return index


@app.route('/unscramble', methods=['POST'])
def unscramble():
    """Handle unscramble requests."""
    if index is None:
        return jsonify({'error': 'Index not initialized'}), 500

    data = request.get_json(silent=True) or {}
    query = data.get('query', '')
    if not isinstance(query, str):
        return jsonify({'error': 'Query must be a string'}), 400
    query = query.rstrip('\r\n').lower()
    if not query:
        return jsonify({'error': 'Empty query'}), 400

    match = index.lookup(normalize(query))
    return jsonify({
        'query': query,
        'match': match,
        'found': match is not None,
    })


@app.route('/words')
def words():
    """List every known word, bucket by bucket."""
    if index is None:
        return jsonify({'error': 'Index not initialized'}), 500
    all_words = list(index.iterate())
    return jsonify({'words': all_words, 'total': len(all_words)})


@app.route('/health')
def health():
    """Health check endpoint."""
    return jsonify({
        'status': 'healthy',
        'index_initialized': index is not None,
        'stats': index.stats() if index is not None else None,
    })


if __name__ == '__main__':
    initialize_index()
    app.run(debug=True, host='0.0.0.0', port=5001)

#!/usr/bin/env python3
"""
Flask Web Application for the Frame Statistics overlay
Provides a live bar chart page and REST API endpoints for feeding per-frame timer samples.
"""

from flask import Flask, render_template, request, jsonify
from werkzeug.utils import secure_filename
import os
import tempfile
from frame_stats import FrameStatistics, FrameStatisticsError, FrameFormatError
from frame_stats.web import DEFAULT_MAX_WIDTH, prepare_results

ALLOWED_EXTENSIONS = {'json'}


def allowed_file(filename):
    return '.' in filename and filename.rsplit('.', 1)[1].lower() in ALLOWED_EXTENSIONS


def create_app(config=None, color_provider=None):
    """
    Build the overlay application around its own FrameStatistics instance.
    
    Args:
        config: Optional StatisticsConfig
        color_provider: Optional callable mapping timer names to colors
    """
    app = Flask(__name__)
    app.config['MAX_CONTENT_LENGTH'] = 100 * 1024 * 1024
    app.config['UPLOAD_FOLDER'] = tempfile.gettempdir()
    app.config['BAR_MAX_WIDTH'] = DEFAULT_MAX_WIDTH
    app.config['FRAME_STATISTICS'] = FrameStatistics(config=config, color_provider=color_provider)
    
    def statistics():
        return app.config['FRAME_STATISTICS']
    
    def results():
        with statistics().lock:
            return prepare_results(statistics(), max_width=app.config['BAR_MAX_WIDTH'])
    
    @app.route('/')
    def index():
        """Overlay page showing the current ranking."""
        return render_template('statistics.html', results=results())
    
    @app.route('/api/frame', methods=['POST'])
    def frame_api():
        """
        API endpoint to deliver one frame of timer samples.
        Accepts: application/json with fields:
          - 'data': JSON text or object mapping timer name -> [gpu_ns, cpu_ns]
          - 'frameRate': measured frame rate (optional, default: 0)
        Returns: JSON with the updated ranking
        """
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict) or 'data' not in payload:
            return jsonify({'error': 'Expected a JSON object with a "data" field'}), 400
        
        try:
            statistics().set_data(payload['data'], payload.get('frameRate', 0.0))
        except FrameFormatError as e:
            return jsonify({'error': str(e)}), 400
        
        return jsonify(results())
    
    @app.route('/api/statistics', methods=['GET'])
    def statistics_api():
        """Return the ranking produced by the last frame."""
        return jsonify(results())
    
    @app.route('/api/reset', methods=['POST'])
    def reset_api():
        """Forget all tracked timers."""
        statistics().reset()
        return jsonify(results())
    
    @app.route('/api/replay', methods=['POST'])
    def replay_api():
        """
        API endpoint to replay a recorded session.
        Accepts: multipart/form-data with a 'file' field holding a recording JSON file
        Returns: JSON with the ranking after the last recorded frame
        """
        if 'file' not in request.files:
            return jsonify({'error': 'No file provided'}), 400
        
        file = request.files['file']
        
        if not file.filename:
            return jsonify({'error': 'No file selected'}), 400
        
        if not allowed_file(file.filename):
            return jsonify({'error': 'Invalid file type. Only JSON files are allowed.'}), 400
        
        filename = secure_filename(file.filename)
        filepath = os.path.join(app.config['UPLOAD_FOLDER'], filename)
        file.save(filepath)
        
        try:
            statistics().process_recording(filepath)
        except FrameStatisticsError as e:
            return jsonify({'error': str(e)}), 400
        except Exception as e:
            return jsonify({'error': f'Error replaying recording: {str(e)}'}), 500
        finally:
            os.remove(filepath)
        
        return jsonify(results())
    
    return app


app = create_app()


if __name__ == '__main__':
    app.run(debug=True, host='0.0.0.0', port=5001)

# Control page served at "/". Talks to the service only through the public HTTP endpoints.
INDEX_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>Video Proxy</title>
<style>
html,body{height:100%;margin:0;font-family:sans-serif;background:#f0f2f5;}
body{display:flex;justify-content:center;align-items:center;}
.container{text-align:center;background:white;padding:30px 40px;border-radius:12px;box-shadow:0 4px 20px rgba(0,0,0,0.1);max-width:500px;width:90%;}
input[type=text]{width:80%;padding:8px 12px;border-radius:6px;border:1px solid #ccc;margin-bottom:12px;}
button{padding:8px 14px;margin:5px;border-radius:6px;border:none;background:#4CAF50;color:white;cursor:pointer;font-weight:bold;}
button:hover{background:#45a049;}
</style>
</head>
<body>
<div class="container">
<h2>Video Proxy Link Generator</h2>
<input type="text" id="videoSrc" placeholder="Enter https:// video URL"><br>
<button id="generateBtn">Generate Proxy Link</button>
<button id="shortBtn">Shorten</button>
<div style="margin-top:15px;">
Proxy Link:<br>
<input type="text" id="resultLink" readonly>
<button data-copy="resultLink">Copy</button>
</div>
<div>
Short Link:<br>
<input type="text" id="shortLink" readonly>
<button data-copy="shortLink">Copy</button>
</div>
</div>
<script>
async function getText(path){
  const res = await fetch(path);
  const text = await res.text();
  if(!res.ok){throw new Error(text);}
  return text;
}

document.getElementById("generateBtn").onclick = async () => {
  const src = document.getElementById("videoSrc").value.trim();
  if(!src.startsWith("https://")){alert("Enter valid HTTPS URL");return;}
  try {
    const token = await getText("/generateToken?src=" + encodeURIComponent(src));
    document.getElementById("resultLink").value = window.location.origin + "/video?token=" + token;
    document.getElementById("shortLink").value = "";
  } catch (e) { alert(e.message); }
};

document.getElementById("shortBtn").onclick = async () => {
  const link = document.getElementById("resultLink").value;
  if(!link){alert("Generate a proxy link first");return;}
  try {
    document.getElementById("shortLink").value = await getText("/short?url=" + encodeURIComponent(link));
  } catch (e) { alert(e.message); }
};

document.querySelectorAll("[data-copy]").forEach((btn) => {
  btn.onclick = () => {
    const field = document.getElementById(btn.dataset.copy);
    navigator.clipboard.writeText(field.value);
  };
});
</script>
</body>
</html>
"""

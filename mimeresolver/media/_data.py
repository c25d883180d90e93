"""Built-in extension table in ``mime.types`` format.

One MIME type per line followed by its extensions.  When an extension
appears under more than one type, the later line wins.
"""

MIME_TYPES = """\
# text
text/plain                                      txt conf def list log in ini
text/html                                       html htm shtml
text/css                                        css
text/csv                                        csv
text/tab-separated-values                       tsv
text/calendar                                   ics ifb
text/markdown                                   md markdown
text/richtext                                   rtx
text/sgml                                       sgml sgm
text/troff                                      t tr roff man me ms
text/uri-list                                   uri uris urls
text/vcard                                      vcard
text/vtt                                        vtt
text/x-asm                                      s asm
text/x-c                                        c cc cxx cpp h hh dic
text/x-java-source                              java
text/x-python                                   py
text/x-setext                                   etx
text/x-vcalendar                                vcs
text/x-vcard                                    vcf
text/yaml                                       yaml yml
text/javascript                                 js mjs

# application
application/atom+xml                            atom
application/ecmascript                          ecma
application/epub+zip                            epub
application/gzip                                gz tgz
application/java-archive                        jar
application/java-serialized-object              ser
application/java-vm                             class
application/json                                json map
application/ld+json                             jsonld
application/manifest+json                       webmanifest
application/msword                              doc dot
application/octet-stream                        bin dms lrf mar so dist distz pkg bpk dump elc deploy
application/oda                                 oda
application/ogg                                 ogx
application/pdf                                 pdf
application/pgp-encrypted                       pgp
application/pgp-signature                       asc sig
application/pkcs10                              p10
application/pkcs7-mime                          p7m p7c
application/pkcs7-signature                     p7s
application/pkcs8                               p8
application/pkix-cert                           cer
application/pkix-crl                            crl
application/postscript                          ai eps ps
application/rdf+xml                             rdf
application/rss+xml                             rss
application/rtf                                 rtf
application/sql                                 sql
application/vnd.amazon.ebook                    azw
application/vnd.android.package-archive         apk
application/vnd.apple.installer+xml             mpkg
application/vnd.apple.mpegurl                   m3u8
application/vnd.debian.binary-package           deb
application/vnd.google-earth.kml+xml            kml
application/vnd.ms-excel                        xls xlm xla xlc xlt xlw
application/vnd.ms-fontobject                   eot
application/vnd.ms-htmlhelp                     chm
application/vnd.ms-powerpoint                   ppt pps pot
application/vnd.ms-project                      mpp mpt
application/vnd.oasis.opendocument.presentation odp
application/vnd.oasis.opendocument.spreadsheet  ods
application/vnd.oasis.opendocument.text         odt
application/vnd.openxmlformats-officedocument.presentationml.presentation  pptx
application/vnd.openxmlformats-officedocument.spreadsheetml.sheet          xlsx
application/vnd.openxmlformats-officedocument.wordprocessingml.document    docx
application/vnd.visio                           vsd vst vss vsw
application/wasm                                wasm
application/x-7z-compressed                     7z
application/x-apple-diskimage                   dmg
application/x-bittorrent                        torrent
application/x-bzip                              bz
application/x-bzip2                             bz2 boz
application/x-cpio                              cpio
application/x-csh                               csh
application/x-debian-package                    udeb
application/x-dvi                               dvi
application/x-font-ttf                          ttc
application/x-freearc                           arc
application/x-hdf                               hdf
application/x-httpd-php                         php
application/x-iso9660-image                     iso
application/x-latex                             latex
application/x-lzh-compressed                    lzh lha
application/x-mobipocket-ebook                  prc mobi
application/x-ms-application                    application
application/x-msdownload                        exe dll com bat msi
application/x-netcdf                            nc cdf
application/x-perl                              pl pm
application/x-rar-compressed                    rar
application/x-rpm                               rpm
application/x-sh                                sh
application/x-shockwave-flash                   swf
application/x-sqlite3                           sqlite db3
application/x-tar                               tar
application/x-tcl                               tcl
application/x-tex                               tex
application/x-texinfo                           texinfo texi
application/x-x509-ca-cert                      der crt pem
application/x-xz                                xz
application/xhtml+xml                           xhtml xht
application/xml                                 xml xsl xsd
application/xml-dtd                             dtd
application/zip                                 zip
application/zstd                                zst

# image
image/apng                                      apng
image/avif                                      avif
image/bmp                                       bmp
image/cgm                                       cgm
image/gif                                       gif
image/heic                                      heic
image/heif                                      heif
image/ief                                       ief
image/jpeg                                      jpeg jpg jpe
image/jxl                                       jxl
image/ktx                                       ktx
image/png                                       png
image/svg+xml                                   svg svgz
image/tiff                                      tiff tif
image/vnd.adobe.photoshop                       psd
image/vnd.dece.graphic                          uvi uvvi uvg uvvg
image/vnd.microsoft.icon                        ico
image/webp                                      webp
image/x-cmu-raster                              ras
image/x-portable-anymap                         pnm
image/x-portable-bitmap                         pbm
image/x-portable-graymap                        pgm
image/x-portable-pixmap                         ppm
image/x-rgb                                     rgb
image/x-tga                                     tga
image/x-xbitmap                                 xbm
image/x-xpixmap                                 xpm
image/x-xwindowdump                             xwd

# audio
audio/aac                                       aac
audio/aiff                                      aif aiff aifc
audio/basic                                     au snd
audio/flac                                      flac
audio/midi                                      mid midi kar rmi
audio/mp4                                       m4a mp4a
audio/mpeg                                      mp3 mpga mp2 mp2a m2a m3a
audio/ogg                                       oga ogg spx opus
audio/vnd.dece.audio                            uva uvva
audio/wav                                       wav
audio/webm                                      weba
audio/x-matroska                                mka
audio/x-mpegurl                                 m3u
audio/x-ms-wma                                  wma
audio/x-pn-realaudio                            ram ra

# video
video/3gpp                                      3gp
video/3gpp2                                     3g2
video/mp2t                                      ts m2ts mts
video/mp4                                       mp4 mp4v mpg4 m4v
video/mpeg                                      mpeg mpg mpe m1v m2v
video/ogg                                       ogv
video/quicktime                                 qt mov
video/vnd.dece.hd                               uvh uvvh
video/vnd.dece.mobile                           uvm uvvm
video/vnd.dece.video                            uvv uvvv
video/webm                                      webm
video/x-flv                                     flv
video/x-matroska                                mkv mk3d mks
video/x-ms-asf                                  asf asx
video/x-ms-wmv                                  wmv
video/x-msvideo                                 avi
video/x-sgi-movie                               movie

# font
font/collection                                 otc
font/otf                                        otf
font/ttf                                        ttf
font/woff                                       woff
font/woff2                                      woff2

# model
model/gltf+json                                 gltf
model/gltf-binary                               glb
model/obj                                       obj
model/stl                                       stl
model/vrml                                      wrl vrml

# message
message/rfc822                                  eml mime
"""
